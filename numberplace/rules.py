"""
Sudoku placement rules: a digit may appear at most once in each row,
column and 3x3 box.
"""
from .board import BOX_SIZE, DIGITS, GRID_SIZE


def box_origin(row, col):
    """Top-left cell of the 3x3 box containing (row, col)."""
    return BOX_SIZE * (row // BOX_SIZE), BOX_SIZE * (col // BOX_SIZE)


def same_box(first, second):
    return box_origin(*first) == box_origin(*second)


def is_placeable(board, row, col, digit):
    """
    Returns True if ``digit`` does not already occur elsewhere in the row,
    column or box of (row, col). The cell's own current value is ignored.
    Inputs are assumed in range.
    """
    # Check row and column
    for i in range(GRID_SIZE):
        if i != col and board[row][i] == digit:
            return False
        if i != row and board[i][col] == digit:
            return False

    # Check subgrid
    box_row, box_col = box_origin(row, col)
    for i in range(box_row, box_row + BOX_SIZE):
        for j in range(box_col, box_col + BOX_SIZE):
            if (i != row or j != col) and board[i][j] == digit:
                return False

    return True


def is_valid_solution(board):
    """
    True when every row, column and box of ``board`` is a permutation of 1-9.
    """
    expected = set(DIGITS)
    for i in range(GRID_SIZE):
        if set(board[i]) != expected:
            return False
        if {board[r][i] for r in range(GRID_SIZE)} != expected:
            return False

    for box_row in range(0, GRID_SIZE, BOX_SIZE):
        for box_col in range(0, GRID_SIZE, BOX_SIZE):
            values = {
                board[i][j]
                for i in range(box_row, box_row + BOX_SIZE)
                for j in range(box_col, box_col + BOX_SIZE)
            }
            if values != expected:
                return False

    return True
