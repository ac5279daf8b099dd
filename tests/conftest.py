import os
import random

import pytest

os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')
# pygame windows open headless in tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')

from numberplace.board import BLANK, copy_board
from numberplace.generator import GeneratedPuzzle
from numberplace.session import GameSession

SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

# Cells left open in the hand-built puzzle, with their solution values
OPEN_CELLS = {(0, 2): 4, (0, 3): 6, (4, 4): 5, (8, 8): 9}


def make_puzzle(open_cells=OPEN_CELLS):
    puzzle = copy_board(SOLUTION)
    for row, col in open_cells:
        puzzle[row][col] = BLANK
    return puzzle


@pytest.fixture
def solution():
    return copy_board(SOLUTION)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def session():
    return GameSession(GeneratedPuzzle('easy', copy_board(SOLUTION), make_puzzle()))
