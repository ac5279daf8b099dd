"""
Puzzle generation: solve a seeded grid, then blank out cells.
"""
import logging
import random
from collections import namedtuple

from . import config
from .board import BLANK, CELL_COUNT, DIGITS, GRID_SIZE, copy_board, empty_board
from .exceptions import GenerationError, InvalidInputError
from .solver import BacktrackingSolver

logger = logging.getLogger(__name__)

GeneratedPuzzle = namedtuple('GeneratedPuzzle', ['difficulty', 'solution', 'puzzle'])


def normalize_difficulty(difficulty):
    """Maps 'Easy', 'EASY', 'easy' ... to the canonical lower-case key."""
    if not isinstance(difficulty, str):
        raise InvalidInputError(f"Difficulty must be a string, got {difficulty!r}")
    key = difficulty.strip().lower()
    if key not in config.REMOVAL_BUDGETS:
        choices = ", ".join(sorted(config.REMOVAL_BUDGETS))
        raise InvalidInputError(f"Unknown difficulty {difficulty!r} (expected one of: {choices})")
    return key


def removal_budget(difficulty):
    """Number of cells blanked for ``difficulty``."""
    return config.REMOVAL_BUDGETS[normalize_difficulty(difficulty)]


class PuzzleGenerator:
    """
    Produces (solution, puzzle) pairs.

    The solution comes from running the backtracking solver on an empty board
    whose first row is a random permutation of 1-9. The puzzle is a copy of
    the solution with a difficulty-dependent number of random cells blanked.
    Puzzles are not checked for a unique solution.
    """

    def __init__(self, rng=None, max_attempts=config.GENERATION_ATTEMPTS,
                 max_solver_steps=config.SOLVER_STEP_LIMIT):
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts
        self.max_solver_steps = max_solver_steps

    def generate(self, difficulty):
        """Main entry point. Returns a GeneratedPuzzle."""
        key = normalize_difficulty(difficulty)
        solution = self.generate_complete_board(difficulty=key)
        puzzle = self.create_puzzle(solution, config.REMOVAL_BUDGETS[key])
        return GeneratedPuzzle(key, solution, puzzle)

    def generate_complete_board(self, *, difficulty):
        """
        Builds a completely filled, valid grid. A failed solve is retried
        with a fresh random first row; GenerationError is raised once
        ``max_attempts`` is used up.
        """
        for attempt in range(1, self.max_attempts + 1):
            board = empty_board()
            # Seeding the first row makes its branch trivial and randomizes the result
            first_row = list(DIGITS)
            self.rng.shuffle(first_row)
            board[0] = first_row

            solver = BacktrackingSolver(self.rng, max_steps=self.max_solver_steps)
            if solver.solve(board):
                logger.debug("Generated solution on attempt %d (%d placements)",
                             attempt, solver.steps)
                return board

            logger.warning("Generation attempt %d/%d failed after %d placements, reseeding",
                           attempt, self.max_attempts, solver.steps)

        raise GenerationError(difficulty, self.max_attempts)

    def create_puzzle(self, solution, budget):
        """
        Copies ``solution`` and blanks ``budget`` distinct cells chosen
        uniformly at random (already-blank picks are resampled).
        """
        if not 0 <= budget <= CELL_COUNT:
            raise InvalidInputError(f"Removal budget must be between 0 and {CELL_COUNT}, got {budget}")

        puzzle = copy_board(solution)
        remaining = budget
        while remaining > 0:
            row = self.rng.randrange(GRID_SIZE)
            col = self.rng.randrange(GRID_SIZE)
            if puzzle[row][col] != BLANK:
                puzzle[row][col] = BLANK
                remaining -= 1

        return puzzle
