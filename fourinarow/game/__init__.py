"""
fourinarow.game - Core game mechanics for Connect Four

This package contains the board representation, win detection and the
turn loop. Nothing in it touches the terminal.
"""

from fourinarow.game.board import Board
from fourinarow.game.errors import (ConnectFourError, InvalidMoveError, ColumnFilledError,
                                    GameOverError, GameAbandoned)
from fourinarow.game.rules import ConnectFourGame, GamePhase, parse_move

__all__ = ['Board', 'ConnectFourGame', 'GamePhase', 'parse_move',
           'ConnectFourError', 'InvalidMoveError', 'ColumnFilledError',
           'GameOverError', 'GameAbandoned']
