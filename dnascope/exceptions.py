"""
Error types for sequence analysis.

Validation problems (empty input, characters outside the DNA alphabet) are
returned inside a ``ValidationResult`` so callers can show them inline.
``InvalidParameterError`` is raised for arguments outside their documented
range, such as a reading frame other than 0, 1 or 2.
"""

from typing import Iterable, Tuple


class SequenceError(ValueError):
    """Base class for all dnascope errors."""


class EmptySequenceError(SequenceError):
    """The sequence has no characters left after removing whitespace."""

    def __init__(self, message: str = "Sequence is empty"):
        super().__init__(message)


class InvalidCharactersError(SequenceError):
    """
    The sequence contains characters outside {A, T, C, G}.

    Attributes:
        chars: Distinct offending characters, in order of first appearance
    """

    def __init__(self, chars: Iterable[str]):
        self.chars: Tuple[str, ...] = tuple(chars)
        super().__init__(
            f"Invalid characters found: {', '.join(self.chars)}. "
            "Only A, T, C, G are allowed."
        )


class InvalidParameterError(SequenceError):
    """A numeric argument is outside its accepted range."""
