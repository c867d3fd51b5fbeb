"""
utils.py - Constants, enumerations and helpers shared across the game

This module holds the board geometry, presentation pacing constants and the
Player / GameResult enumerations used by the board model and the game loop.
"""

from enum import Enum, auto
from typing import Optional

import numpy as np

# Board geometry
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of tokens in a line to win

# Presentation pacing (seconds)
DROP_FRAME_DELAY = 0.05    # per cell a coin passes while falling
WIN_PAUSE = 0.5            # before the end-of-game sequence starts
SLIDE_FRAME_DELAY = 0.125  # per frame of the slide-away animation

# End-of-game fall offsets
FALL_LIMIT = 20        # a column offset never grows past this
FALL_HIDDEN = 19       # coins of a column at or past this offset are not drawn
COIN_DROP_FRAMES = 19  # extra frames spent letting the coins fall away

COIN_SYMBOL = "o"


class Player(Enum):
    """Cell contents and the two players."""
    EMPTY = 0
    ONE = 1
    TWO = 2

    def other(self) -> 'Player':
        """Get the opponent; EMPTY has no opponent."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        return str(self.value)


class GameResult(Enum):
    """Outcome of a game."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    @classmethod
    def win(cls, player: Player) -> 'GameResult':
        """Build the win result for ``player``."""
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        if player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"{player!r} cannot win a game")

    def winner(self) -> Optional[Player]:
        """
        Get the winning player.

        Returns:
            Player.ONE or Player.TWO, or None for a draw or a running game
        """
        if self == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    def is_game_over(self) -> bool:
        """Check if the result ends the game."""
        return self != GameResult.IN_PROGRESS


def is_valid_position(row: int, col: int) -> bool:
    """Check if a (row, col) position lies on the board."""
    return 0 <= row < ROWS and 0 <= col < COLS


def column_height(grid: np.ndarray, column: int) -> int:
    """Number of tokens stacked in ``column``."""
    return int(np.count_nonzero(grid[:, column] != Player.EMPTY.value))


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the grid as plain text, with 1-based column numbers on top.

    Args:
        grid: The (ROWS, COLS) board array

    Returns:
        Multi-line ASCII representation of the board
    """
    symbols = {
        Player.EMPTY.value: " ",
        Player.ONE.value: "X",
        Player.TWO.value: "O",
    }

    lines = [" " + " ".join(str(col + 1) for col in range(COLS))]
    for row in range(ROWS):
        lines.append("|" + "|".join(symbols[int(cell)] for cell in grid[row]) + "|")
    lines.append("-" * (2 * COLS + 1))

    return "\n".join(lines)
