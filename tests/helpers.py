from fourinarow.interfaces.renderer import Renderer
from fourinarow.utils import ROWS, COLS

# A full board with no four-in-a-row anywhere
DRAW_ROWS = [[(row // 2 + col) % 2 + 1 for col in range(COLS)] for row in range(ROWS)]


def empty_rows():
    return [[0] * COLS for _ in range(ROWS)]


class RecordingRenderer(Renderer):
    """Keeps every call the game loop makes so tests can inspect them."""

    def __init__(self):
        self.boards = []
        self.messages = []
        self.drops = []
        self.endings = []

    def present_board(self, grid, fall_offsets=None):
        self.boards.append(grid.copy())

    def present_message(self, text, row):
        self.messages.append((text, row))

    def present_drop(self, column, row, player):
        self.drops.append((column, row, player))

    def present_end_of_game(self, winner):
        self.endings.append(winner)


class ScriptedInput:
    """Feeds canned lines to the game loop and records who asked."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.asked = []

    def __call__(self, player):
        self.asked.append(player)
        return self.lines.pop(0)
