"""
Generic, vendor-neutral APIs for loadconfig.

This package defines interfaces and DTOs for:
- Variable stores (`variables.py`)
- Template engines (`variables.py`)

The loader depends only on these modules, never on a concrete
store or engine implementation.
"""
