"""
rules.py - Turn management and the move loop for a two-player game

This module provides ConnectFourGame, which owns the board and the active
player, validates entered columns and drives a game through a renderer and
an input source until somebody wins or the board fills up.
"""

import re
from enum import Enum, auto
from typing import Callable, List, Optional

from fourinarow.debug import debug
from fourinarow.game.board import Board
from fourinarow.game.errors import (ColumnFilledError, GameOverError,
                                    InvalidMoveError)
from fourinarow.utils import COLS, GameResult, Player

_COLUMN_PATTERN = re.compile(r"\+?[0-9]+")

# Screen lines used for the prompt and the error message
STATUS_ROW = 9
ERROR_ROW = 10


def prompt_for(player: Player) -> str:
    return f"Player {player}, please enter your move : "


class GamePhase(Enum):
    AWAITING_MOVE = auto()
    EVALUATING = auto()
    FINISHED = auto()


def parse_move(text: str) -> int:
    """
    Turn a user-entered column number into a 0-based column index.

    Args:
        text: Raw input, e.g. ``" 4\\n"``

    Returns:
        The column index in ``[0, COLS)``

    Raises:
        InvalidMoveError: If the text is not an integer between 1 and COLS
    """
    stripped = text.strip()
    if not _COLUMN_PATTERN.fullmatch(stripped):
        raise InvalidMoveError(text)

    # More significant digits than COLS has can never be in range
    digits = stripped.lstrip("+").lstrip("0")
    if len(digits) > len(str(COLS)):
        raise InvalidMoveError(text)

    number = int(digits or "0")
    if not (1 <= number <= COLS):
        raise InvalidMoveError(text)
    return number - 1


class ConnectFourGame:
    """
    A single game between Player.ONE and Player.TWO.

    Player.ONE moves first. A move that is rejected does not use up the
    player's turn.
    """

    def __init__(self, board: Optional[Board] = None):
        self.board = board if board is not None else Board()
        self.current_player = Player.ONE
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.moves_made: List[int] = []
        debug.debug("New game, Player ONE to move", "game")

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None while playing or after a draw."""
        return self.result.winner()

    def is_game_over(self) -> bool:
        """Check if the game has reached the FINISHED phase."""
        return self.phase == GamePhase.FINISHED

    def submit_move(self, text: str) -> int:
        """
        Play the entered column for the current player.

        Args:
            text: The column as typed by the player (1-based)

        Returns:
            The row the token landed in

        Raises:
            InvalidMoveError: If the text is not a column number
            ColumnFilledError: If the column is full
            GameOverError: If the game has already finished
        """
        if self.is_game_over():
            raise GameOverError(f"Game already finished: {self.result.name}")

        column = parse_move(text)
        row = self.board.drop_token(column, self.current_player)
        self.moves_made.append(column)
        debug.info(f"Player {self.current_player} dropped into column {column + 1}, row {row}", "game")

        self._evaluate()
        return row

    def _evaluate(self):
        self.phase = GamePhase.EVALUATING

        result = self.board.check_win()
        if result.is_game_over():
            self._finish(result)
        elif self.board.is_full():
            self._finish(GameResult.DRAW)
        else:
            self.current_player = self.current_player.other()
            self.phase = GamePhase.AWAITING_MOVE
            debug.debug(f"Player {self.current_player} to move", "game")

    def _finish(self, result: GameResult):
        self.result = result
        self.phase = GamePhase.FINISHED
        debug.info(f"Game over after {len(self.moves_made)} moves: {result.name}", "game")
        if result.winner() is not None:
            debug.debug(f"Winning line: {self.board.get_winning_line()}", "game")

    def run(self, request_move: Callable[[Player], str], renderer) -> GameResult:
        """
        Play the game to the end.

        Args:
            request_move: Called with the active player; returns one line of input
            renderer: Presentation collaborator (see fourinarow.interfaces.renderer)

        Returns:
            The final GameResult
        """
        renderer.present_board(self.board.grid, None)

        while not self.is_game_over():
            player = self.current_player
            renderer.present_message(prompt_for(player), STATUS_ROW)
            text = request_move(player)

            try:
                row = self.submit_move(text)
            except (InvalidMoveError, ColumnFilledError) as e:
                debug.debug(f"Rejected {text!r} from Player {player}: {type(e).__name__}", "game")
                renderer.present_message(str(e), ERROR_ROW)
                continue

            renderer.present_message("", ERROR_ROW)
            renderer.present_drop(self.moves_made[-1], row, player)

        renderer.present_end_of_game(self.winner)
        return self.result
