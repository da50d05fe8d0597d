"""
DNA sequence cleaning and validation.

Validation failures are returned as values rather than raised, so an
interactive caller can report them next to the input field.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from dnascope.exceptions import (
    EmptySequenceError,
    InvalidCharactersError,
    SequenceError,
)
from dnascope.utils.constants import DNA_ALPHABET

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating a DNA sequence.

    Attributes:
        is_valid: True when the sequence is non-empty and ATCG-only
        error: The reason for rejection, or None when valid
    """
    is_valid: bool
    error: Optional[SequenceError] = None

    def __bool__(self) -> bool:
        return self.is_valid

    @property
    def message(self) -> Optional[str]:
        """Human-readable error text, or None when valid."""
        if self.error is None:
            return None
        return str(self.error)

    def raise_for_error(self) -> None:
        """Raise the carried error, if any."""
        if self.error is not None:
            raise self.error


def clean_sequence(sequence: str) -> str:
    """
    Remove all whitespace and convert to uppercase.

    Example:
        >>> clean_sequence(" atg c\\ngt ")
        'ATGCGT'
    """
    return _WHITESPACE.sub("", sequence.upper())


def validate_dna_sequence(sequence: str) -> ValidationResult:
    """
    Check that a sequence is a non-empty string over {A, T, C, G}.

    Whitespace is ignored and case does not matter.

    Args:
        sequence: Raw sequence text

    Returns:
        ValidationResult; ``error`` is an EmptySequenceError or an
        InvalidCharactersError listing each offending character once

    Example:
        >>> validate_dna_sequence("ATGX").message
        'Invalid characters found: X. Only A, T, C, G are allowed.'
    """
    cleaned = clean_sequence(sequence)

    if not cleaned:
        return ValidationResult(False, EmptySequenceError())

    # dict preserves first-appearance order
    invalid = dict.fromkeys(c for c in cleaned if c not in DNA_ALPHABET)
    if invalid:
        logger.debug("Rejected sequence of length %d: %s", len(cleaned), list(invalid))
        return ValidationResult(False, InvalidCharactersError(invalid))

    return ValidationResult(True)
