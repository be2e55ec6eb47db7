"""
Core utilities for loadconfig.

This package holds:
- configuration loading (`config.py`)
- shared error types (`errors.py`)
- logging helpers (`logging.py`)
- the DTO base class (`dto.py`)
"""
