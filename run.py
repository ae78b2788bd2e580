#!/usr/bin/env python3
"""
run.py - Entry point for a two-player Connect Four game in the terminal
"""

import sys

from connect_four.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
