#!/usr/bin/env python3
"""
CLI entry point for the loadconfig command.

This script lets the loader run from a source checkout without
installing the package.
"""

import sys
from loadconfig.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
