"""
FASTA input and output.

This module provides functions for turning pasted or uploaded text
into a named sequence, and for writing sequences back out.
"""

from dnascope.io.fasta import (
    parse_fasta,
    read_fasta,
    write_fasta,
    FastaRecord,
)

__all__ = [
    "parse_fasta",
    "read_fasta",
    "write_fasta",
    "FastaRecord",
]
