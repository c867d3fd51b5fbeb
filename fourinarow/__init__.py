"""
fourinarow - Two-player Connect Four for the terminal

This package provides the board model, the turn loop and terminal
renderers for a 6x7 Connect Four game played by two people.
"""

# Version number
__version__ = '0.1.0'
