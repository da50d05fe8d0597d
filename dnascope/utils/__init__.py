"""
Sequence analysis utilities for DNA.

This module provides common operations for DNA sequences:
- Composition statistics and GC content
- Complement and reverse complement
- Codon scanning and translation
- ORF finding on both strands
- Global alignment and mutation classification
"""

from dnascope.utils.constants import (
    CODON_TABLE,
    START_CODONS,
    STOP_CODONS,
    PURINES,
    PYRIMIDINES,
    AMINO_ACID_PROPERTIES,
    AminoAcidInfo,
    amino_acid_class,
)

from dnascope.utils.sequences import (
    calculate_stats,
    gc_content,
    complement,
    reverse_complement,
    get_codons,
    translate,
    find_orfs,
    format_sequence,
    SequenceStats,
    Codon,
    ORF,
    OrfScanState,
)

from dnascope.utils.alignment import (
    needleman_wunsch,
    align_sequences,
    classify_mutations,
    classify_substitution,
    AlignmentResult,
    Mutation,
)

__all__ = [
    "CODON_TABLE",
    "START_CODONS",
    "STOP_CODONS",
    "PURINES",
    "PYRIMIDINES",
    "AMINO_ACID_PROPERTIES",
    "AminoAcidInfo",
    "amino_acid_class",
    "calculate_stats",
    "gc_content",
    "complement",
    "reverse_complement",
    "get_codons",
    "translate",
    "find_orfs",
    "format_sequence",
    "SequenceStats",
    "Codon",
    "ORF",
    "OrfScanState",
    "needleman_wunsch",
    "align_sequences",
    "classify_mutations",
    "classify_substitution",
    "AlignmentResult",
    "Mutation",
]
