#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py puzzle04.txt          # plain output
    python main.py -f rich puzzle04.txt  # Rich terminal output
    python main.py -r -s 3               # random 3×3 board
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from npuzzle.cli import app  # noqa: E402

if __name__ == "__main__":
    app()
