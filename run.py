#!/usr/bin/env python3
"""
run.py - Main entry point for terminal Connect Four

Usage:
    python run.py                  # play one game
    python run.py --plain          # line-by-line board, no cursor movement
    python run.py --debug_level info --log_file game.log
"""

from fourinarow.interfaces.cli import main

if __name__ == "__main__":
    main()
