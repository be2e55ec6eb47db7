"""
Web components for loadconfig.

This package contains:
- ``varserver_app.py``: development variable server (FastAPI).
"""
