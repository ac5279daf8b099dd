import random

import pytest

from numberplace.board import BLANK, empty_board
from numberplace.exceptions import InvalidInputError
from numberplace.rules import is_valid_solution
from numberplace.solver import BacktrackingSolver


def test_solves_empty_board(rng):
    board = empty_board()
    assert BacktrackingSolver(rng).solve(board)
    assert is_valid_solution(board)


def test_keeps_existing_digits(solution, rng):
    board = [row[:] for row in solution]
    for row, col in [(0, 0), (3, 4), (8, 8), (6, 2)]:
        board[row][col] = BLANK
    assert BacktrackingSolver(rng).solve(board)
    assert board == solution


def test_randomized_order_gives_different_grids():
    first = empty_board()
    second = empty_board()
    BacktrackingSolver(random.Random(1)).solve(first)
    BacktrackingSolver(random.Random(2)).solve(second)
    assert is_valid_solution(first) and is_valid_solution(second)
    assert first != second


def test_same_seed_is_reproducible():
    first = empty_board()
    second = empty_board()
    BacktrackingSolver(random.Random(7)).solve(first)
    BacktrackingSolver(random.Random(7)).solve(second)
    assert first == second


def test_reports_unsolvable_board(rng):
    board = empty_board()
    board[0] = [1, 2, 3, 4, 5, 6, 7, 8, BLANK]
    board[1][8] = 9
    assert BacktrackingSolver(rng).solve(board) is False


def test_step_limit_abandons_search(rng):
    solver = BacktrackingSolver(rng, max_steps=10)
    assert solver.solve(empty_board()) is False
    assert solver.steps == 10


def test_rejects_malformed_board(rng):
    with pytest.raises(InvalidInputError):
        BacktrackingSolver(rng).solve([[0] * 9 for _ in range(8)])

    board = empty_board()
    board[2][2] = 12
    with pytest.raises(InvalidInputError):
        BacktrackingSolver(rng).solve(board)
