"""Exceptions raised by wordgen."""


class WordGenError(Exception):
    """Base class for all wordgen errors."""


class EmptyModelError(WordGenError):
    """Generation was requested from a table with no observed transitions."""

    def __init__(self, message: str = "frequency table is empty, ingest some words first"):
        super().__init__(message)


class InvalidLengthError(WordGenError, ValueError):
    """Requested word length (or length range) cannot be generated."""


class CorpusReadError(WordGenError, OSError):
    """The training corpus could not be read or decoded."""
