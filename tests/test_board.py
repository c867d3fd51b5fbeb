import unittest

import numpy as np

from fourinarow.game.board import Board
from fourinarow.game.errors import ColumnFilledError, InvalidMoveError
from fourinarow.utils import ROWS, COLS, GameResult, Player

from tests.helpers import DRAW_ROWS, empty_rows


def board_with(cells):
    """Board with player values at the given {(row, col): value} cells."""
    rows = empty_rows()
    for (row, col), value in cells.items():
        rows[row][col] = value
    return Board.from_rows(rows)


class TestDropToken(unittest.TestCase):
    def test_fills_column_bottom_to_top(self):
        for col in range(COLS):
            board = Board()
            for k in range(ROWS):
                player = Player.ONE if k % 2 == 0 else Player.TWO
                self.assertEqual(board.drop_token(col, player), ROWS - 1 - k)
                self.assertEqual(board.grid[ROWS - 1 - k, col], player.value)

            before = board.get_state()
            with self.assertRaises(ColumnFilledError) as cm:
                board.drop_token(col, Player.ONE)
            self.assertEqual(cm.exception.column, col)
            self.assertTrue(np.array_equal(before, board.grid))

    def test_changes_only_the_lowest_empty_cell(self):
        board = Board()
        for col, player in [(3, Player.ONE), (3, Player.TWO), (2, Player.ONE), (3, Player.ONE)]:
            before = board.get_state()
            row = board.drop_token(col, player)

            changed = np.argwhere(before != board.grid)
            self.assertEqual(changed.tolist(), [[row, col]])
            self.assertEqual(before[row, col], Player.EMPTY.value)
            self.assertTrue(np.all(before[row + 1:, col] != Player.EMPTY.value))

    def test_out_of_range_column(self):
        board = Board()
        for col in (-1, COLS):
            with self.assertRaises(InvalidMoveError):
                board.drop_token(col, Player.ONE)
        self.assertFalse(board.grid.any())

    def test_empty_is_not_a_player(self):
        with self.assertRaises(InvalidMoveError):
            Board().drop_token(0, Player.EMPTY)

    def test_valid_moves_and_full(self):
        board = Board.from_rows(DRAW_ROWS)
        self.assertTrue(board.is_full())
        self.assertEqual(board.get_valid_moves(), [])

        board = Board()
        for _ in range(ROWS):
            board.drop_token(4, Player.TWO)
        self.assertFalse(board.is_full())
        self.assertEqual(board.get_valid_moves(), [0, 1, 2, 3, 5, 6])
        self.assertFalse(board.is_valid_move(4))
        self.assertEqual(board.column_height(4), ROWS)
        self.assertEqual(board.column_height(0), 0)

    def test_copy_is_independent(self):
        board = Board()
        board.drop_token(3, Player.ONE)
        clone = board.copy()

        clone.drop_token(3, Player.TWO)
        self.assertEqual(board.column_height(3), 1)
        self.assertEqual(clone.column_height(3), 2)
        self.assertEqual(clone.grid[ROWS - 1, 3], Player.ONE.value)
        self.assertFalse(np.shares_memory(board.grid, clone.grid))


class TestCheckWin(unittest.TestCase):
    def test_empty_board(self):
        self.assertEqual(Board().check_win(), GameResult.IN_PROGRESS)

    def test_horizontal_bottom_row(self):
        board = Board()
        for col in range(4):
            board.drop_token(col, Player.ONE)
        self.assertEqual(board.check_win(), GameResult.PLAYER_ONE_WIN)
        self.assertEqual(board.get_winning_line(), [(5, 0), (5, 1), (5, 2), (5, 3)])

    def test_vertical(self):
        board = Board()
        for _ in range(4):
            board.drop_token(2, Player.TWO)
        self.assertEqual(board.check_win(), GameResult.PLAYER_TWO_WIN)

    def test_diagonal_rising(self):
        board = board_with({
            (5, 0): 1, (4, 1): 1, (3, 2): 1, (2, 3): 1,
            (5, 1): 2, (5, 2): 2, (4, 2): 2, (5, 3): 2, (4, 3): 2, (3, 3): 2,
        })
        self.assertEqual(board.check_win(), GameResult.PLAYER_ONE_WIN)

    def test_diagonal_falling(self):
        board = board_with({
            (2, 0): 2, (3, 1): 2, (4, 2): 2, (5, 3): 2,
            (3, 0): 1, (4, 0): 1, (5, 0): 1, (4, 1): 1, (5, 1): 1, (5, 2): 1,
        })
        self.assertEqual(board.check_win(), GameResult.PLAYER_TWO_WIN)

    def test_lines_touching_the_edges(self):
        cases = [
            [(0, 3), (0, 4), (0, 5), (0, 6)],  # top row, right end
            [(0, 6), (1, 6), (2, 6), (3, 6)],  # right column, top
            [(0, 3), (1, 4), (2, 5), (3, 6)],  # falling into the right edge
            [(3, 3), (2, 4), (1, 5), (0, 6)],  # rising into the top right corner
            [(2, 0), (3, 0), (4, 0), (5, 0)],  # left column, bottom
        ]
        for cells in cases:
            with self.subTest(cells=cells):
                board = board_with({cell: 2 for cell in cells})
                self.assertEqual(board.check_win(), GameResult.PLAYER_TWO_WIN)
                self.assertEqual(sorted(board.get_winning_line()), sorted(cells))

    def test_near_misses(self):
        cases = [
            {(5, 0): 1, (5, 1): 1, (5, 2): 1, (5, 4): 1},
            {(5, 3): 2, (4, 3): 2, (3, 3): 2, (1, 3): 2},
            {(5, 0): 1, (4, 1): 1, (3, 2): 1, (1, 4): 1},
            {(5, 0): 1, (5, 1): 1, (5, 2): 1, (5, 3): 2},
        ]
        for cells in cases:
            with self.subTest(cells=cells):
                board = board_with(cells)
                self.assertEqual(board.check_win(), GameResult.IN_PROGRESS)
                self.assertEqual(board.get_winning_line(), [])

    def test_full_board_without_line(self):
        board = Board.from_rows(DRAW_ROWS)
        self.assertEqual(board.check_win(), GameResult.IN_PROGRESS)

    def test_first_line_in_scan_order_wins(self):
        cells = {(5, col): 1 for col in range(3, 7)}
        cells.update({(row, 0): 2 for row in range(2, 6)})
        board = board_with(cells)

        self.assertEqual(board.check_win(), GameResult.PLAYER_TWO_WIN)
        self.assertEqual(board.get_winning_line(), [(2, 0), (3, 0), (4, 0), (5, 0)])

    def test_detection_does_not_mutate(self):
        board = Board()
        for col in range(4):
            board.drop_token(col, Player.ONE)
        before = board.get_state()

        first = board.check_win()
        second = board.check_win()
        self.assertEqual(first, second)
        self.assertTrue(np.array_equal(before, board.grid))


class TestCheckLine(unittest.TestCase):
    def test_three_lines_from_a_cell(self):
        board = board_with({(5, col): 1 for col in range(4)})
        self.assertTrue(board.check_line(0, 5, -1, 1))
        self.assertFalse(board.check_line(1, 5, -1, 1))

        board = board_with({(row, 6): 2 for row in range(4)})
        self.assertTrue(board.check_line(6, 0, 1, -1))

    def test_lines_leaving_the_board_are_skipped(self):
        board = board_with({(5, 5): 1, (5, 6): 1})
        self.assertFalse(board.check_line(5, 5, -1, 1))
        self.assertFalse(board.check_line(6, 5, 1, 1))


class TestFromRows(unittest.TestCase):
    def test_wrong_shape(self):
        with self.assertRaises(ValueError):
            Board.from_rows([[0] * COLS for _ in range(ROWS - 1)])

    def test_unknown_value(self):
        rows = empty_rows()
        rows[5][0] = 3
        with self.assertRaises(ValueError):
            Board.from_rows(rows)

    def test_render(self):
        board = Board()
        board.drop_token(0, Player.ONE)
        board.drop_token(6, Player.TWO)
        lines = board.render().splitlines()

        self.assertEqual(lines[0], " 1 2 3 4 5 6 7")
        self.assertEqual(lines[-2], "|X| | | | | |O|")
        self.assertEqual(lines[-1], "-" * (2 * COLS + 1))


if __name__ == "__main__":
    unittest.main()
