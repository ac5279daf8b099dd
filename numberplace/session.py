"""
Mutable play state for one puzzle.

A GameSession is built from a generator result and then changed only through
its public operations. Starting another game never resets a session in place:
``new_session`` (or ``GameSession.restart``) builds a fresh one and the owner
replaces its reference.
"""
import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple

from .board import (
    BLANK,
    DIGITS,
    GRID_SIZE,
    boards_equal,
    copy_board,
    count_digit,
    validate_cell,
    validate_digit,
)
from .exceptions import InvalidInputError
from .generator import PuzzleGenerator
from .rules import is_valid_solution, same_box

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# Cell status values exposed to renderers
STATUS_GIVEN = 'given'
STATUS_CORRECT = 'correct'
STATUS_WRONG = 'wrong'
STATUS_BLANK = 'blank'


@dataclass(frozen=True)
class CellView:
    """Everything a renderer needs to draw one cell."""
    row: int
    col: int
    value: int
    given: bool
    status: str
    memos: Tuple[int, ...]
    selected: bool
    related: bool
    same_digit: bool


@dataclass(frozen=True)
class SessionSnapshot:
    """
    Immutable copy of a session's state. ``solution_board`` stays None until
    the puzzle is complete; per-cell correctness is available through
    ``cells`` without revealing the answer.
    """
    difficulty: str
    current_board: Tuple[Tuple[int, ...], ...]
    initial_mask: Tuple[Tuple[bool, ...], ...]
    solution_board: Optional[Tuple[Tuple[int, ...], ...]]
    annotations: Dict[Cell, Tuple[int, ...]]
    selected_cell: Optional[Cell]
    memo_mode: bool
    mistake_count: int
    is_complete: bool
    exhausted_digits: FrozenSet[int]
    cells: Tuple[Tuple[CellView, ...], ...]

    def cell(self, row, col):
        return self.cells[row][col]


class GameSession:
    """
    One game in progress (or finished).

    States are InProgress and Complete. Once complete, digit placement,
    memo edits and erasing are silent no-ops; selection and the memo-mode
    switch keep working.
    """

    def __init__(self, generated, generator=None):
        solution = generated.solution
        puzzle = generated.puzzle
        if not is_valid_solution(solution):
            raise InvalidInputError("Session requires a fully valid solution board")
        for i in range(GRID_SIZE):
            for j in range(GRID_SIZE):
                if puzzle[i][j] != BLANK and puzzle[i][j] != solution[i][j]:
                    raise InvalidInputError(f"Given at ({i}, {j}) disagrees with the solution")

        self.generator = generator
        self.difficulty = generated.difficulty
        self.solution = copy_board(solution)
        self.board = copy_board(puzzle)
        self.initial_mask = [[value != BLANK for value in row] for row in puzzle]
        self.annotations = {}
        self.selected = None
        self.memo_mode = False
        self.mistakes = 0
        self.is_complete = False

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------
    def restart(self, difficulty=None):
        """
        Builds a replacement session (same generator, optionally another
        difficulty). This session is left untouched.
        """
        return new_session(difficulty or self.difficulty, self.generator)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def is_digit_exhausted(self, digit):
        """
        True when ``digit`` occupies exactly 9 cells of the current board.
        Wrong placements count too.
        """
        validate_digit(digit)
        return count_digit(self.board, digit) == GRID_SIZE

    def exhausted_digits(self):
        return frozenset(d for d in DIGITS if count_digit(self.board, d) == GRID_SIZE)

    def memos_at(self, row, col):
        """Memo digits at a cell in ascending order."""
        validate_cell(row, col)
        return tuple(sorted(self.annotations.get((row, col), ())))

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------
    def select_cell(self, row, col):
        """Moves the cursor to (row, col). Given cells can be selected too."""
        self.selected = validate_cell(row, col)
        return self.snapshot()

    def move_selection(self, d_row, d_col):
        """Shifts the cursor, clamped to the grid edges. No-op without a selection."""
        if self.selected is None:
            return self.snapshot()
        row, col = self.selected
        row = min(GRID_SIZE - 1, max(0, row + d_row))
        col = min(GRID_SIZE - 1, max(0, col + d_col))
        self.selected = (row, col)
        return self.snapshot()

    def toggle_memo_mode(self):
        self.memo_mode = not self.memo_mode
        return self.snapshot()

    def place_digit(self, digit):
        """
        Applies ``digit`` to the selected cell.

        In memo mode the digit is toggled in the cell's memo set. Otherwise
        the same digit clears the cell, and a different digit is written;
        a digit that disagrees with the solution counts as one mistake.
        """
        validate_digit(digit)
        cell = self._editable_cell()
        if cell is None:
            return self.snapshot()

        if self.memo_mode:
            self._toggle_memo(cell, digit)
            return self.snapshot()

        row, col = cell
        if self.board[row][col] == digit:
            self.board[row][col] = BLANK
            logger.debug("Cleared %s", cell)
        else:
            self.board[row][col] = digit
            # A filled cell never keeps memos
            self.annotations.pop(cell, None)
            if digit != self.solution[row][col]:
                self.mistakes += 1
                logger.debug("Wrong digit %d at %s (mistakes=%d)", digit, cell, self.mistakes)
            else:
                logger.debug("Placed %d at %s", digit, cell)

        self.check_completion()
        return self.snapshot()

    def erase(self):
        """Blanks the selected cell. Memos, mistakes and completion are untouched."""
        cell = self._editable_cell()
        if cell is not None:
            row, col = cell
            self.board[row][col] = BLANK
        return self.snapshot()

    def check_completion(self):
        """Marks the session complete once the board matches the solution."""
        if not self.is_complete and boards_equal(self.board, self.solution):
            self.is_complete = True
            logger.info("Puzzle complete (%s, %d mistakes)", self.difficulty, self.mistakes)
        return self.is_complete

    def _editable_cell(self):
        if self.is_complete or self.selected is None:
            return None
        row, col = self.selected
        if self.initial_mask[row][col]:
            return None
        return self.selected

    def _toggle_memo(self, cell, digit):
        row, col = cell
        # Memos only live on blank cells
        if self.board[row][col] != BLANK:
            return
        memos = self.annotations.setdefault(cell, set())
        if digit in memos:
            memos.discard(digit)
            if not memos:
                del self.annotations[cell]
        else:
            memos.add(digit)

    # -------------------------------------------------------------------------
    # Snapshot
    # -------------------------------------------------------------------------
    def snapshot(self):
        """Returns an immutable SessionSnapshot of the current state."""
        selected_value = BLANK
        if self.selected is not None:
            selected_value = self.board[self.selected[0]][self.selected[1]]

        cells = tuple(
            tuple(self._cell_view(i, j, selected_value) for j in range(GRID_SIZE))
            for i in range(GRID_SIZE)
        )
        return SessionSnapshot(
            difficulty=self.difficulty,
            current_board=tuple(tuple(row) for row in self.board),
            initial_mask=tuple(tuple(row) for row in self.initial_mask),
            solution_board=tuple(tuple(row) for row in self.solution) if self.is_complete else None,
            annotations={cell: tuple(sorted(memos)) for cell, memos in self.annotations.items()},
            selected_cell=self.selected,
            memo_mode=self.memo_mode,
            mistake_count=self.mistakes,
            is_complete=self.is_complete,
            exhausted_digits=self.exhausted_digits(),
            cells=cells,
        )

    def _cell_view(self, row, col, selected_value):
        value = self.board[row][col]
        given = self.initial_mask[row][col]
        memos = tuple(sorted(self.annotations.get((row, col), ())))

        if given:
            status = STATUS_GIVEN
        elif value == BLANK:
            status = STATUS_BLANK
        elif value == self.solution[row][col]:
            status = STATUS_CORRECT
        else:
            status = STATUS_WRONG

        selected = related = same_digit = False
        if self.selected is not None:
            sel_row, sel_col = self.selected
            selected = (row, col) == self.selected
            related = row == sel_row or col == sel_col or same_box((row, col), self.selected)
            if value != BLANK:
                same_digit = value == selected_value
            elif selected_value != BLANK:
                same_digit = selected_value in memos

        return CellView(row, col, value, given, status, memos, selected, related, same_digit)


def new_session(difficulty, generator=None):
    """
    Generates a puzzle for ``difficulty`` and wraps it in a fresh
    GameSession with zero mistakes, no memos and no selection.
    """
    if generator is None:
        generator = PuzzleGenerator()
    session = GameSession(generator.generate(difficulty), generator)
    logger.info("New %s session", session.difficulty)
    return session
