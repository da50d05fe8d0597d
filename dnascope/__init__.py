"""
DNAScope: A Sequence Analysis Engine for DNA

This package provides tools for:
- Validating and parsing pasted or uploaded DNA (raw or FASTA)
- Nucleotide composition statistics
- Complement, codon and translation views of a sequence
- Open reading frame detection on both strands
- Pairwise global alignment with mutation classification

Every function is pure: results are immutable value objects and no
state is kept between calls.
"""

import logging

__version__ = "0.1.0"
__author__ = "DNAScope Contributors"

from dnascope.exceptions import (
    SequenceError,
    EmptySequenceError,
    InvalidCharactersError,
    InvalidParameterError,
)

from dnascope.sequence import (
    clean_sequence,
    validate_dna_sequence,
    ValidationResult,
)

from dnascope.io import (
    parse_fasta,
    read_fasta,
    write_fasta,
    FastaRecord,
)

from dnascope.utils import (
    calculate_stats,
    complement,
    reverse_complement,
    get_codons,
    translate,
    find_orfs,
    format_sequence,
    align_sequences,
    SequenceStats,
    Codon,
    ORF,
    AlignmentResult,
    Mutation,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "SequenceError",
    "EmptySequenceError",
    "InvalidCharactersError",
    "InvalidParameterError",
    # Input
    "clean_sequence",
    "validate_dna_sequence",
    "ValidationResult",
    "parse_fasta",
    "read_fasta",
    "write_fasta",
    "FastaRecord",
    # Analysis
    "calculate_stats",
    "complement",
    "reverse_complement",
    "get_codons",
    "translate",
    "find_orfs",
    "format_sequence",
    "align_sequences",
    "SequenceStats",
    "Codon",
    "ORF",
    "AlignmentResult",
    "Mutation",
]
