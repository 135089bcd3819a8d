#!/usr/bin/env python3
"""
Convenience script to start a Sudoku game in the terminal.

Usage:
    python play.py
    python play.py --seed 42 --reveal 0.4
"""

import sys
import os

# Make the package importable when run from a checkout
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sudoku_game.cli import main

if __name__ == '__main__':
    sys.exit(main())
