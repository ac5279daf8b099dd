"""
Board representation shared by every component.

A board is a list of 9 rows, each a list of 9 ints. ``BLANK`` (0) marks an
empty cell; 1-9 are placed digits.
"""
from .exceptions import InvalidInputError

BLANK = 0
GRID_SIZE = 9
BOX_SIZE = 3
DIGITS = tuple(range(1, 10))
CELL_COUNT = GRID_SIZE * GRID_SIZE


def empty_board():
    """Creates a new 9x9 board with every cell blank."""
    return [[BLANK] * GRID_SIZE for _ in range(GRID_SIZE)]


def copy_board(board):
    return [row[:] for row in board]


def boards_equal(first, second):
    """Cell-for-cell comparison of two boards."""
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            if first[i][j] != second[i][j]:
                return False
    return True


def count_digit(board, digit):
    """Counts how many cells currently hold ``digit``."""
    return sum(row.count(digit) for row in board)


def count_filled(board):
    return sum(1 for row in board for value in row if value != BLANK)


def _is_int(value):
    # bool is a subclass of int but never a valid coordinate or digit
    return isinstance(value, int) and not isinstance(value, bool)


def validate_cell(row, col):
    """Raises InvalidInputError unless (row, col) lies on the 9x9 grid."""
    if not (_is_int(row) and _is_int(col)):
        raise InvalidInputError(f"Cell coordinates must be integers, got ({row!r}, {col!r})")
    if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
        raise InvalidInputError(f"Cell ({row}, {col}) is outside the 9x9 grid")
    return row, col


def validate_digit(digit):
    """Raises InvalidInputError unless ``digit`` is one of 1-9."""
    if not _is_int(digit) or digit not in DIGITS:
        raise InvalidInputError(f"Digit must be an integer from 1 to 9, got {digit!r}")
    return digit


def validate_board(board):
    """
    Checks the shape and contents of a board supplied from outside.
    Every cell must be BLANK or a digit 1-9.
    """
    if len(board) != GRID_SIZE or any(len(row) != GRID_SIZE for row in board):
        raise InvalidInputError("Board must have 9 rows of 9 cells")
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            value = board[i][j]
            if not _is_int(value) or not (value == BLANK or value in DIGITS):
                raise InvalidInputError(f"Cell ({i}, {j}) holds invalid value {value!r}")
    return board
