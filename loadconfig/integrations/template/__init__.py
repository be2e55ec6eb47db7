"""
Template engine integrations.
"""

from .dollar_template import DollarTemplateEngine

__all__ = ["DollarTemplateEngine"]
