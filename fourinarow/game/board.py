"""
board.py - Board representation and core game mechanics for Connect Four

This module implements the Board class, which owns the grid, places dropped
tokens at the lowest free cell of a column and detects four-in-a-row.
"""

from typing import Iterator, List, Sequence, Tuple

import numpy as np

from fourinarow.debug import debug
from fourinarow.game.errors import ColumnFilledError, InvalidMoveError
from fourinarow.utils import (ROWS, COLS, CONNECT_N, Player, GameResult,
                              column_height, is_valid_position, render_board_ascii)

Cell = Tuple[int, int]  # (row, col)


class Board:
    """
    A 6x7 Connect Four grid.

    The grid is a numpy array indexed ``[row, col]`` with row 0 at the top.
    ``drop_token`` is the only operation that changes it; everything else
    only reads.
    """

    def __init__(self):
        debug.trace("Initializing new Board", "board")
        self.grid = np.zeros((ROWS, COLS), dtype=int)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'Board':
        """
        Build a board from row-major cell values (0 empty, 1 or 2 a player).

        Raises:
            ValueError: If the shape is not ROWS x COLS or a value is unknown
        """
        grid = np.array(rows, dtype=int)
        if grid.shape != (ROWS, COLS):
            raise ValueError(f"Board must be {ROWS}x{COLS}, got {grid.shape}")
        if not np.isin(grid, [p.value for p in Player]).all():
            raise ValueError("Board cells must be 0, 1 or 2")

        board = cls()
        board.grid = grid
        return board

    def copy(self) -> 'Board':
        """
        Create an independent copy of the board.

        Returns:
            A new Board whose grid does not share memory with this one
        """
        new_board = Board()
        new_board.grid = self.grid.copy()
        return new_board

    def is_valid_move(self, column: int) -> bool:
        """
        Check if a token can be dropped into ``column`` (0-indexed).

        Returns:
            True if the column exists and still has an empty cell
        """
        if not (0 <= column < COLS):
            return False
        return bool(self.grid[0, column] == Player.EMPTY.value)

    def get_valid_moves(self) -> List[int]:
        """
        Get the columns that still accept a token.

        Returns:
            List of 0-indexed column numbers
        """
        return [col for col in range(COLS) if self.is_valid_move(col)]

    def column_height(self, column: int) -> int:
        """
        Count the tokens stacked in a column.

        Args:
            column: Column to inspect (0-indexed)

        Returns:
            Number of occupied cells, 0 to ROWS
        """
        return column_height(self.grid, column)

    def is_full(self) -> bool:
        """Check if every column has reached the top row."""
        return not np.any(self.grid[0] == Player.EMPTY.value)

    def drop_token(self, column: int, player: Player) -> int:
        """
        Drop ``player``'s token into ``column`` (0-indexed).

        Args:
            column: Column to drop into, in ``[0, COLS)``
            player: Player.ONE or Player.TWO

        Returns:
            The row the token landed in

        Raises:
            InvalidMoveError: If the column or player is out of range
            ColumnFilledError: If the column's top cell is already taken
        """
        if player not in (Player.ONE, Player.TWO):
            raise InvalidMoveError(str(player), f"{player!r} cannot drop a token")
        if not (0 <= column < COLS):
            raise InvalidMoveError(str(column + 1))
        if self.grid[0, column] != Player.EMPTY.value:
            debug.debug(f"Column {column} is full", "board")
            raise ColumnFilledError(column)

        row = ROWS - 1
        while self.grid[row, column] != Player.EMPTY.value:
            row -= 1
        self.grid[row, column] = player.value

        debug.trace(f"Placed {player.name} at ({row}, {column})", "board")
        return row

    def _line(self, cells: List[Cell]) -> bool:
        first = self.grid[cells[0]]
        return first != Player.EMPTY.value and all(self.grid[cell] == first for cell in cells[1:])

    def _lines_from(self, col: int, row: int, row_step: int, col_step: int) -> Iterator[List[Cell]]:
        """
        The lines starting at (row, col) that stay on the board: the one
        moving through rows only, the diagonal, and the one moving through
        columns only.
        """
        steps = ((row_step, 0), (row_step, col_step), (0, col_step))
        for dr, dc in steps:
            end = (row + (CONNECT_N - 1) * dr, col + (CONNECT_N - 1) * dc)
            if is_valid_position(row, col) and is_valid_position(*end):
                yield [(row + k * dr, col + k * dc) for k in range(CONNECT_N)]

    def check_line(self, col: int, row: int, row_step: int, col_step: int) -> bool:
        """
        Check whether a four-in-a-row starts at (row, col).

        Args:
            col, row: The starting cell
            row_step: +1 to walk down, -1 to walk up
            col_step: +1 to walk right, -1 to walk left

        Returns:
            True if the vertical, diagonal or horizontal line of four
            starting there holds the same player
        """
        return any(self._line(cells) for cells in self._lines_from(col, row, row_step, col_step))

    def _line_starts(self) -> Iterator[Tuple[int, int, int, int]]:
        """
        Occupied cells and step pairs to test, in scan order (columns, then
        rows). A start is only offered in a direction that leaves room for
        CONNECT_N cells.
        """
        for col in range(COLS):
            for row in range(ROWS):
                if self.grid[row, col] == Player.EMPTY.value:
                    continue
                if col < 4 and row < 3:
                    yield col, row, 1, 1
                if col > 2 and row < 3:
                    yield col, row, 1, -1
                if col > 2 and row > 2:
                    yield col, row, -1, -1
                if col < 4 and row > 2:
                    yield col, row, -1, 1

    def check_win(self) -> GameResult:
        """
        Look for four-in-a-row anywhere on the board.

        Returns:
            The win for the player owning the first line found, or
            GameResult.IN_PROGRESS. A full board is not reported as a draw.
        """
        debug.start_timer("check_win")
        result = GameResult.IN_PROGRESS
        for col, row, row_step, col_step in self._line_starts():
            if self.check_line(col, row, row_step, col_step):
                result = GameResult.win(Player(int(self.grid[row, col])))
                break
        debug.end_timer("check_win", "board")
        return result

    def get_winning_line(self) -> List[Cell]:
        """
        Get the cells of the first four-in-a-row found by ``check_win``.

        Returns:
            List of (row, col) cells, or an empty list if nobody has won
        """
        for col, row, row_step, col_step in self._line_starts():
            for cells in self._lines_from(col, row, row_step, col_step):
                if self._line(cells):
                    return cells
        return []

    def get_state(self) -> np.ndarray:
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()


if __name__ == "__main__":
    board = Board()
    for col, player in [(3, Player.ONE), (2, Player.TWO), (4, Player.ONE),
                        (2, Player.TWO), (5, Player.ONE), (2, Player.TWO), (6, Player.ONE)]:
        row = board.drop_token(col, player)
        print(f"{player.name} -> column {col + 1}, row {row}")
    print(board)
    print(f"Result: {board.check_win()}, line: {board.get_winning_line()}")
