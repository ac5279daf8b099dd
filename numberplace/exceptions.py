"""Error types raised by the number-place engine."""


class NumberPlaceError(Exception):
    """Base class for every error raised by this package."""


class InvalidInputError(NumberPlaceError, ValueError):
    """
    A caller passed a coordinate, digit, difficulty or board outside the
    closed 9x9 / 1-9 domain. These are integration bugs, so they are raised
    instead of being clamped.
    """


class GenerationError(NumberPlaceError, RuntimeError):
    """
    Puzzle generation failed on every retry. The condition is retryable:
    calling the generator again draws fresh randomness.
    """

    def __init__(self, difficulty, attempts):
        self.difficulty = difficulty
        self.attempts = attempts
        super().__init__(
            f"Could not generate a {difficulty} puzzle after {attempts} attempts"
        )
