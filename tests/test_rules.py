from numberplace.board import BLANK, empty_board
from numberplace.rules import is_placeable, is_valid_solution, same_box


def test_placeable_on_empty_board():
    board = empty_board()
    assert all(is_placeable(board, 4, 4, d) for d in range(1, 10))


def test_row_conflict():
    board = empty_board()
    board[2][7] = 5
    assert not is_placeable(board, 2, 0, 5)
    assert is_placeable(board, 2, 0, 6)


def test_column_conflict():
    board = empty_board()
    board[8][3] = 1
    assert not is_placeable(board, 0, 3, 1)


def test_box_conflict():
    board = empty_board()
    board[4][5] = 9
    # (3, 3) shares the centre box but neither row nor column
    assert not is_placeable(board, 3, 3, 9)
    assert is_placeable(board, 0, 0, 9)


def test_own_cell_is_ignored(solution):
    assert is_placeable(solution, 0, 0, 5)
    assert not is_placeable(solution, 0, 0, 3)


def test_same_box():
    assert same_box((0, 0), (2, 2))
    assert not same_box((0, 0), (3, 0))


def test_valid_solution(solution):
    assert is_valid_solution(solution)


def test_invalid_solutions(solution):
    swapped = [row[:] for row in solution]
    # Swapping two cells in a row keeps the row valid but breaks columns
    swapped[0][0], swapped[0][1] = swapped[0][1], swapped[0][0]
    assert not is_valid_solution(swapped)

    holed = [row[:] for row in solution]
    holed[5][5] = BLANK
    assert not is_valid_solution(holed)
