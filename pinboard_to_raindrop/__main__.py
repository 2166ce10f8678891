#!/usr/bin/env python3
"""
Package entry point for the Pinboard to Raindrop.io converter.

This allows the package to be executed with: python -m pinboard_to_raindrop
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
