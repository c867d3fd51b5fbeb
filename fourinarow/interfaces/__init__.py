"""
fourinarow.interfaces - Terminal input and rendering

This package contains the command-line entry point and the renderers
the game loop draws through.
"""

# Don't import anything here to avoid circular imports
__all__ = []
