"""
loadconfig: load system variables from configuration files.
"""

__version__ = "0.1.0"
