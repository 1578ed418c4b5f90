#!/usr/bin/env python3
"""Entry point for running org2confluence as a module.

This allows the package to be executed as:
    python -m org2confluence [arguments]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
