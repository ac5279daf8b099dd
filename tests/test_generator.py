import logging
import random

import pytest

from numberplace import generator as generator_module
from numberplace.board import BLANK, count_filled
from numberplace.exceptions import GenerationError, InvalidInputError
from numberplace.generator import PuzzleGenerator, normalize_difficulty, removal_budget
from numberplace.rules import is_valid_solution
from numberplace.solver import BacktrackingSolver


@pytest.mark.parametrize('difficulty, givens', [
    ('Easy', 51),
    ('Medium', 36),
    ('Hard', 26),
])
def test_puzzle_has_expected_number_of_givens(difficulty, givens, rng):
    result = PuzzleGenerator(rng).generate(difficulty)
    assert count_filled(result.puzzle) == givens
    assert count_filled(result.puzzle) == 81 - removal_budget(difficulty)


@pytest.mark.parametrize('seed', [0, 1, 2, 3, 4])
def test_solution_is_valid_and_puzzle_consistent(seed):
    result = PuzzleGenerator(random.Random(seed)).generate('medium')
    assert is_valid_solution(result.solution)
    for i in range(9):
        for j in range(9):
            value = result.puzzle[i][j]
            assert value == BLANK or value == result.solution[i][j]


def test_puzzle_is_a_separate_board(rng):
    result = PuzzleGenerator(rng).generate('easy')
    result.puzzle[0][0] = BLANK
    assert result.solution[0][0] != BLANK


def test_seeded_generation_is_reproducible():
    first = PuzzleGenerator(random.Random(99)).generate('hard')
    second = PuzzleGenerator(random.Random(99)).generate('hard')
    assert first == second


def test_difficulty_names():
    assert normalize_difficulty('EASY') == 'easy'
    assert normalize_difficulty(' Hard ') == 'hard'
    assert removal_budget('Easy') == 30
    assert removal_budget('medium') == 45
    assert removal_budget('hard') == 55

    with pytest.raises(InvalidInputError):
        normalize_difficulty('expert')
    with pytest.raises(InvalidInputError):
        normalize_difficulty(3)


def test_create_puzzle_budget_bounds(solution, rng):
    generator = PuzzleGenerator(rng)
    assert generator.create_puzzle(solution, 0) == solution
    assert count_filled(generator.create_puzzle(solution, 81)) == 0
    with pytest.raises(InvalidInputError):
        generator.create_puzzle(solution, 82)


def test_raises_after_all_attempts_fail(rng, caplog):
    generator = PuzzleGenerator(rng, max_attempts=3, max_solver_steps=0)
    with caplog.at_level(logging.WARNING, logger='numberplace.generator'):
        with pytest.raises(GenerationError) as excinfo:
            generator.generate('easy')

    assert excinfo.value.attempts == 3
    assert excinfo.value.difficulty == 'easy'
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 3


def test_retries_after_a_failed_solve(rng, monkeypatch):
    calls = []

    class FlakySolver(BacktrackingSolver):
        def solve(self, board):
            calls.append(1)
            if len(calls) == 1:
                return False
            return super().solve(board)

    monkeypatch.setattr(generator_module, 'BacktrackingSolver', FlakySolver)
    result = PuzzleGenerator(rng).generate('easy')
    assert len(calls) == 2
    assert is_valid_solution(result.solution)


def test_complete_board_failure_names_the_difficulty(rng):
    generator = PuzzleGenerator(rng, max_attempts=1, max_solver_steps=0)
    with pytest.raises(GenerationError) as excinfo:
        generator.generate_complete_board(difficulty='hard')
    assert excinfo.value.difficulty == 'hard'

    # Difficulty is keyword-only with no default
    with pytest.raises(TypeError):
        generator.generate_complete_board()
    with pytest.raises(TypeError):
        generator.generate_complete_board('hard')
