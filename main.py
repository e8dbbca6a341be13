#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Maze generator + guide path in the terminal.

Run:
  python3 main.py --width 12 --height 8 --seed 7
"""

import sys

from mazecore.cli import main

if __name__ == "__main__":
    sys.exit(main())
