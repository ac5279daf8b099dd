"""Command line entry point: ``python -m numberplace``."""
import argparse
import logging
import random
import sys

from . import config
from .exceptions import InvalidInputError
from .generator import PuzzleGenerator, normalize_difficulty


def setup_logging(level):
    """Sends package logs to stderr at ``level``."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
    logger = logging.getLogger('numberplace')
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def parse_args(argv, settings):
    parser = argparse.ArgumentParser(prog='numberplace', description="Play number place.")
    parser.add_argument('--difficulty', default=settings['difficulty'],
                        type=normalize_difficulty,
                        help="easy, medium or hard (default: %(default)s)")
    parser.add_argument('--seed', type=int, default=settings['seed'],
                        help="seed for reproducible puzzles")
    parser.add_argument('--log-level', default=settings['log_level'], type=str.upper,
                        choices=config.LOG_LEVELS)
    return parser.parse_args(argv)


def main(argv=None):
    try:
        settings = config.load_settings()
    except InvalidInputError as exc:
        sys.stderr.write(f"numberplace: {exc}\n")
        return 2

    args = parse_args(argv, settings)
    setup_logging(args.log_level)

    # Imported late so --help works without a display
    from .app import NumberPlaceApp

    generator = PuzzleGenerator(random.Random(args.seed))
    NumberPlaceApp(generator, args.difficulty).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
