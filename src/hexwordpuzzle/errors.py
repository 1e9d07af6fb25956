"""Exceptions raised by the puzzle core."""


class PuzzleError(Exception):
    """Base class for all errors raised by hexwordpuzzle."""


class InvalidInputError(PuzzleError, ValueError):
    """Letters or surface dimensions that cannot be laid out."""


class WordListError(PuzzleError, ValueError):
    """A word list file that is missing, unreadable or malformed."""
