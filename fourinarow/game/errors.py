"""
errors.py - Exceptions raised by the board model and the game loop
"""

from fourinarow.utils import COLS


class ConnectFourError(Exception):
    """Base class for game errors."""


class InvalidMoveError(ConnectFourError):
    """The entered text does not name a column between 1 and COLS."""

    def __init__(self, text: str, message: str = None):
        self.text = text
        super().__init__(message or f"Invalid move. Please enter a number between 1 and {COLS}.")


class ColumnFilledError(ConnectFourError):
    """The column has no empty cell left."""

    def __init__(self, column: int):
        self.column = column
        super().__init__("This column is already filled!! Enter a different move:")


class GameOverError(ConnectFourError):
    """A move was submitted after the game finished."""


class GameAbandoned(ConnectFourError):
    """The input stream closed or the player interrupted the game."""
