"""Number-place (Sudoku) puzzle engine with a pygame front end."""
from .board import BLANK, GRID_SIZE
from .exceptions import GenerationError, InvalidInputError, NumberPlaceError
from .generator import GeneratedPuzzle, PuzzleGenerator, removal_budget
from .rules import is_placeable, is_valid_solution
from .session import CellView, GameSession, SessionSnapshot, new_session
from .solver import BacktrackingSolver

__version__ = "0.1.0"

__all__ = [
    'BLANK',
    'GRID_SIZE',
    'BacktrackingSolver',
    'CellView',
    'GameSession',
    'GeneratedPuzzle',
    'GenerationError',
    'InvalidInputError',
    'NumberPlaceError',
    'PuzzleGenerator',
    'SessionSnapshot',
    'is_placeable',
    'is_valid_solution',
    'new_session',
    'removal_budget',
]
