"""
renderer.py - Presentation of the board, messages and animations

The game loop only talks to the Renderer interface. TerminalRenderer draws
with ANSI cursor positioning and colors; PlainRenderer prints line by line
for terminals (or pipes) without cursor control.
"""

import sys
import time
from typing import Callable, List, Optional, TextIO

import numpy as np

from fourinarow.debug import debug
from fourinarow.game.rules import ERROR_ROW, STATUS_ROW
from fourinarow.utils import (ROWS, COLS, COIN_SYMBOL, COIN_DROP_FRAMES,
                              DROP_FRAME_DELAY, FALL_HIDDEN, FALL_LIMIT,
                              SLIDE_FRAME_DELAY, WIN_PAUSE, Player,
                              render_board_ascii)

# ANSI escape sequences
RESET = "\033[0m"
WHITE = "\033[97m"
CLEAR_SCREEN = "\033[2J\033[H"
CLEAR_LINE = "\033[2K"
CLEAR_BELOW = "\033[J"

PLAYER_COLORS = {
    Player.ONE: "\033[94m",  # light blue
    Player.TWO: "\033[91m",  # light red
}

BASE_LINE = "-" * (2 * COLS + 1)
BASE_ROW = ROWS + 1


def end_message(winner: Optional[Player]) -> str:
    if winner is None:
        return "The board is full. It's a draw!"
    return f"Player {winner} won the game!!"


class FallOffsets:
    """
    How far the coins of each column have fallen during the end-of-game
    animation. Only affects drawing, never the board.
    """

    def __init__(self):
        self.offsets: List[int] = [0] * COLS

    def __getitem__(self, column: int) -> int:
        return self.offsets[column]

    def advance(self, x: int):
        """
        Let one more column start falling each time the board has moved
        two steps to the right; ``x`` is the board's current left edge + 1.
        """
        for i in range(min((x - 1) // 2, COLS), 0, -1):
            if self.offsets[COLS - i] < FALL_LIMIT:
                self.offsets[COLS - i] += 1

    def is_hidden(self, column: int) -> bool:
        return self.offsets[column] >= FALL_HIDDEN


class Renderer:
    """Renderer interface. Every method is a no-op here."""

    def present_board(self, grid: np.ndarray, fall_offsets: Optional[FallOffsets] = None):
        pass

    def present_message(self, text: str, row: int):
        pass

    def present_drop(self, column: int, row: int, player: Player):
        pass

    def present_end_of_game(self, winner: Optional[Player]):
        pass


class TerminalRenderer(Renderer):
    """
    Draws the game at fixed screen positions.

    Layout: column numbers on line 0, the grid on lines 1-6, the base line on
    line 7, prompts on line 9 and errors on line 10.
    """

    def __init__(self, stream: Optional[TextIO] = None, animate: bool = True,
                 sleep: Callable[[float], None] = time.sleep):
        self.stream = stream or sys.stdout
        self.animate = animate
        self._sleep = sleep
        self._grid: Optional[np.ndarray] = None
        self._started = False

    def _write(self, text: str):
        self.stream.write(text)

    def _goto(self, x: int, y: int):
        self._write(f"\033[{y + 1};{x + 1}H")

    def _pause(self, seconds: float):
        if self.animate:
            self.stream.flush()
            self._sleep(seconds)

    def _coin(self, player: Player) -> str:
        return f"{PLAYER_COLORS[player]}{COIN_SYMBOL}{WHITE}"

    def _draw_header(self):
        self._goto(0, 0)
        self._write(WHITE + " " + " ".join(str(col + 1) for col in range(COLS)) + " ")

    def _draw(self, grid: np.ndarray, offsets: FallOffsets, x: int):
        for line in range(1, ROWS + 1):
            self._goto(0, line)
            self._write(CLEAR_LINE)

        self._goto(0, BASE_ROW)
        self._write(CLEAR_BELOW + BASE_LINE)

        for row in range(ROWS):
            self._goto(x, row + 1)
            self._write("|")
            for col in range(COLS):
                cell = Player(int(grid[row, col]))
                if cell != Player.EMPTY and not offsets.is_hidden(col):
                    self._goto(2 * col + 1 + x, row + 1 + offsets[col])
                    self._write(self._coin(cell))
                self._goto(2 * col + 2 + x, row + 1)
                self._write("|")

        self.stream.flush()

    def present_board(self, grid: np.ndarray, fall_offsets: Optional[FallOffsets] = None):
        self._grid = grid
        if not self._started:
            self._write(CLEAR_SCREEN)
            self._started = True
        self._draw_header()
        self._draw(grid, fall_offsets or FallOffsets(), 0)

    def present_message(self, text: str, row: int):
        self._goto(0, row)
        self._write(CLEAR_LINE + WHITE + text)
        self.stream.flush()

    def present_drop(self, column: int, row: int, player: Player):
        x = 2 * column + 1
        for line in range(1, row + 1):
            self._goto(x, line)
            self._write(self._coin(player))
            self._pause(DROP_FRAME_DELAY)
            self._goto(x, line)
            self._write(" ")

        self._goto(x, row + 1)
        self._write(self._coin(player))
        self.stream.flush()

    def _frame(self, offsets: FallOffsets, x: int):
        offsets.advance(x + 1)
        self._draw(self._grid, offsets, x)
        self._pause(SLIDE_FRAME_DELAY)

    def present_end_of_game(self, winner: Optional[Player]):
        message = end_message(winner)
        self.present_message(message, STATUS_ROW)

        if winner is not None and self._grid is not None:
            debug.debug("Playing end-of-game animation", "render")
            self._pause(WIN_PAUSE)

            offsets = FallOffsets()
            distance = 2 * COLS + 2
            for x in range(distance):
                self._frame(offsets, x)
            for _ in range(COIN_DROP_FRAMES):
                self._frame(offsets, distance - 1)
            for x in range(distance - 1, -1, -1):
                self._frame(offsets, x)

            self._goto(0, BASE_ROW + 1)
            self._write(CLEAR_BELOW)
            self.present_message(message, STATUS_ROW)

        self._goto(0, ERROR_ROW + 1)
        self._write(RESET + "\n")
        self.stream.flush()


class PlainRenderer(Renderer):
    """Line-oriented output without cursor movement or animation."""

    def __init__(self, stream: Optional[TextIO] = None, prompt_row: int = STATUS_ROW):
        self.stream = stream or sys.stdout
        self.prompt_row = prompt_row
        self._grid: Optional[np.ndarray] = None

    def present_board(self, grid: np.ndarray, fall_offsets: Optional[FallOffsets] = None):
        self._grid = grid
        print(render_board_ascii(grid), file=self.stream)

    def present_message(self, text: str, row: int):
        if not text:
            return
        if row == self.prompt_row:
            print(text, end="", file=self.stream, flush=True)
        else:
            print(text, file=self.stream)

    def present_drop(self, column: int, row: int, player: Player):
        if self._grid is not None:
            print(render_board_ascii(self._grid), file=self.stream)

    def present_end_of_game(self, winner: Optional[Player]):
        print(end_message(winner), file=self.stream)
