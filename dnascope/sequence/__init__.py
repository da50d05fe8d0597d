"""
Sequence input handling.

This module provides functions for:
- Normalizing raw sequence text (whitespace, case)
- Validating DNA sequences against the A/T/C/G alphabet
"""

from dnascope.sequence.validation import (
    clean_sequence,
    validate_dna_sequence,
    ValidationResult,
)

__all__ = [
    "clean_sequence",
    "validate_dna_sequence",
    "ValidationResult",
]
