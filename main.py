#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play SIZE [--mines N] [--seed S]
    python main.py watch SIZE [--games G] [--delay D]
"""
import sys
from pathlib import Path

# Allow running from a source checkout without installing.
sys.path.insert(0, str(Path(__file__).parent / "src"))

from sweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
