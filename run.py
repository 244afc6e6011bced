#!/usr/bin/env python3
"""
run.py - Main entry point for dropfour
"""

import sys

from dropfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
