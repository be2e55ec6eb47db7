"""
Command line interface for loadconfig.
"""
