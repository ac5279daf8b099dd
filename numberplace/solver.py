"""
Randomized backtracking solver used to produce complete grids.
"""
import logging
import random

from .board import BLANK, DIGITS, GRID_SIZE, validate_board
from .rules import is_placeable

logger = logging.getLogger(__name__)


class BacktrackingSolver:
    """
    Depth-first search over cells in row-major order. At each blank cell the
    digits 1-9 are tried in a freshly shuffled order, so repeated runs on an
    empty board yield different completed grids.

    ``rng`` is any object with a ``shuffle`` method (normally
    ``random.Random``) and can be seeded for reproducible output.
    ``max_steps`` caps the number of tentative placements; once exceeded the
    solve is abandoned and reported as a failure.
    """

    def __init__(self, rng=None, max_steps=None):
        self.rng = rng if rng is not None else random.Random()
        self.max_steps = max_steps
        self.steps = 0

    def solve(self, board):
        """
        Fills ``board`` in place. Returns True if a complete valid assignment
        was reached from the given state. On False the board contents are
        unreliable.
        """
        validate_board(board)
        self.steps = 0
        solved = self._fill(board)
        logger.debug("Solver finished after %d placements (solved=%s)", self.steps, solved)
        return solved

    def _fill(self, board):
        cell = self._find_blank(board)
        if cell is None:
            return True  # Board is full

        row, col = cell
        numbers = list(DIGITS)
        self.rng.shuffle(numbers)

        for num in numbers:
            if not is_placeable(board, row, col, num):
                continue

            if self.max_steps is not None and self.steps >= self.max_steps:
                return False
            self.steps += 1

            board[row][col] = num
            if self._fill(board):
                return True
            # Backtrack
            board[row][col] = BLANK

        return False

    @staticmethod
    def _find_blank(board):
        for i in range(GRID_SIZE):
            for j in range(GRID_SIZE):
                if board[i][j] == BLANK:
                    return i, j
        return None
