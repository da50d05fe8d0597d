"""
Pairwise sequence alignment and mutation classification.

Implements Needleman-Wunsch global alignment with a linear gap
penalty, and classifies every differing column of an alignment
as a substitution, insertion or deletion.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from dnascope.exceptions import InvalidParameterError
from dnascope.utils.constants import GAP, PURINES, PYRIMIDINES

logger = logging.getLogger(__name__)

# Default scoring
DNA_MATCH_SCORE = 2
DNA_MISMATCH_SCORE = -1
GAP_PENALTY = -2

SUBSTITUTION = "substitution"
INSERTION = "insertion"
DELETION = "deletion"
TRANSITION = "transition"
TRANSVERSION = "transversion"


@dataclass(frozen=True)
class Mutation:
    """
    A single differing column of an alignment.

    Attributes:
        position: 0-based column in the gapped alignment
        original: Character in the first sequence ('-' for insertions)
        mutated: Character in the second sequence ('-' for deletions)
        type: "substitution", "insertion" or "deletion"
        classification: "transition" or "transversion" for substitutions,
            None otherwise
    """
    position: int
    original: str
    mutated: str
    type: str
    classification: Optional[str] = None


@dataclass(frozen=True)
class AlignmentResult:
    """Result of a global alignment with its mutation summary."""
    aligned_seq1: str
    aligned_seq2: str
    score: int
    mutations: Tuple[Mutation, ...] = ()
    total_mutations: int = 0
    mutation_rate: float = 0.0
    transitions: int = 0
    transversions: int = 0
    insertions: int = 0
    deletions: int = 0

    def __str__(self) -> str:
        """Pretty print the alignment."""
        lines = []
        match_line = ""
        for c1, c2 in zip(self.aligned_seq1, self.aligned_seq2):
            if c1 == c2 and c1 != GAP:
                match_line += "|"
            elif c1 == GAP or c2 == GAP:
                match_line += " "
            else:
                match_line += "."

        # Split into chunks for display
        chunk_size = 60
        for i in range(0, len(self.aligned_seq1), chunk_size):
            lines.append(self.aligned_seq1[i:i + chunk_size])
            lines.append(match_line[i:i + chunk_size])
            lines.append(self.aligned_seq2[i:i + chunk_size])
            lines.append("")

        lines.append(f"Score: {self.score}")
        lines.append(
            f"Mutations: {self.total_mutations} ({self.mutation_rate:.2f}%)"
        )
        return "\n".join(lines)


def needleman_wunsch(
    seq1: str,
    seq2: str,
    match_score: int = DNA_MATCH_SCORE,
    mismatch_score: int = DNA_MISMATCH_SCORE,
    gap_penalty: int = GAP_PENALTY
) -> Tuple[str, str, int]:
    """
    Global alignment using Needleman-Wunsch algorithm.

    The traceback walks from the bottom-right cell and, among moves that
    reproduce the cell's score, prefers diagonal, then up (gap in seq2),
    then left (gap in seq1). This fixes the choice between equally
    scoring alignments.

    Args:
        seq1: First sequence
        seq2: Second sequence
        match_score: Score for matching bases
        mismatch_score: Score for mismatching bases
        gap_penalty: Penalty for gaps (linear gap model)

    Returns:
        Tuple (aligned_seq1, aligned_seq2, score); the aligned strings
        have equal length and use '-' for gaps

    Example:
        >>> needleman_wunsch("ATCG", "ATG")[:2]
        ('ATCG', 'AT-G')
    """
    seq1 = seq1.upper()
    seq2 = seq2.upper()

    m, n = len(seq1), len(seq2)

    score_matrix = np.zeros((m + 1, n + 1), dtype=np.int64)
    score_matrix[:, 0] = np.arange(m + 1) * gap_penalty
    score_matrix[0, :] = np.arange(n + 1) * gap_penalty

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if seq1[i - 1] == seq2[j - 1]:
                diag_score = score_matrix[i - 1, j - 1] + match_score
            else:
                diag_score = score_matrix[i - 1, j - 1] + mismatch_score

            up_score = score_matrix[i - 1, j] + gap_penalty
            left_score = score_matrix[i, j - 1] + gap_penalty

            score_matrix[i, j] = max(diag_score, up_score, left_score)

    # Traceback
    aligned1, aligned2 = [], []
    i, j = m, n

    while i > 0 or j > 0:
        if i > 0 and j > 0:
            if seq1[i - 1] == seq2[j - 1]:
                current_score = match_score
            else:
                current_score = mismatch_score

            if score_matrix[i, j] == score_matrix[i - 1, j - 1] + current_score:
                aligned1.append(seq1[i - 1])
                aligned2.append(seq2[j - 1])
                i -= 1
                j -= 1
                continue

        if i > 0 and score_matrix[i, j] == score_matrix[i - 1, j] + gap_penalty:
            aligned1.append(seq1[i - 1])
            aligned2.append(GAP)
            i -= 1
        else:
            aligned1.append(GAP)
            aligned2.append(seq2[j - 1])
            j -= 1

    return (
        "".join(reversed(aligned1)),
        "".join(reversed(aligned2)),
        int(score_matrix[m, n]),
    )


def classify_substitution(base1: str, base2: str) -> str:
    """
    Classify a point substitution.

    Purine to purine (A/G) and pyrimidine to pyrimidine (C/T) changes
    are transitions; everything else is a transversion.

    Example:
        >>> classify_substitution("A", "G")
        'transition'
        >>> classify_substitution("A", "C")
        'transversion'
    """
    base1, base2 = base1.upper(), base2.upper()
    same_class = (
        (base1 in PURINES and base2 in PURINES)
        or (base1 in PYRIMIDINES and base2 in PYRIMIDINES)
    )
    return TRANSITION if same_class else TRANSVERSION


def classify_mutations(aligned_seq1: str, aligned_seq2: str) -> List[Mutation]:
    """
    List every differing column of an alignment.

    Args:
        aligned_seq1: Gapped first sequence
        aligned_seq2: Gapped second sequence, same length

    Returns:
        Mutations in column order

    Raises:
        InvalidParameterError: If the aligned strings differ in length
    """
    if len(aligned_seq1) != len(aligned_seq2):
        raise InvalidParameterError("Aligned sequences must be of equal length")

    mutations = []
    for pos, (base1, base2) in enumerate(zip(aligned_seq1, aligned_seq2)):
        if base1 == base2:
            continue
        if base1 == GAP:
            mutations.append(Mutation(pos, base1, base2, INSERTION))
        elif base2 == GAP:
            mutations.append(Mutation(pos, base1, base2, DELETION))
        else:
            mutations.append(Mutation(
                pos, base1, base2, SUBSTITUTION, classify_substitution(base1, base2)
            ))
    return mutations


def align_sequences(seq1: str, seq2: str) -> AlignmentResult:
    """
    Globally align two DNA sequences and summarize their differences.

    Scoring is fixed at match +2, mismatch -1, gap -2.

    Args:
        seq1: Reference sequence
        seq2: Sequence compared against the reference

    Returns:
        AlignmentResult; mutation_rate is a percentage of the aligned
        length (0 for two empty sequences)

    Example:
        >>> result = align_sequences("ATCG", "ATG")
        >>> result.aligned_seq2, result.deletions
        ('AT-G', 1)
    """
    aligned1, aligned2, score = needleman_wunsch(seq1, seq2)
    mutations = tuple(classify_mutations(aligned1, aligned2))

    transitions = sum(1 for m in mutations if m.classification == TRANSITION)
    transversions = sum(1 for m in mutations if m.classification == TRANSVERSION)
    insertions = sum(1 for m in mutations if m.type == INSERTION)
    deletions = sum(1 for m in mutations if m.type == DELETION)

    total = len(mutations)
    rate = total / len(aligned1) * 100 if aligned1 else 0.0

    logger.debug(
        "Aligned %d bp vs %d bp: score %d, %d mutations",
        len(seq1), len(seq2), score, total
    )

    return AlignmentResult(
        aligned_seq1=aligned1,
        aligned_seq2=aligned2,
        score=score,
        mutations=mutations,
        total_mutations=total,
        mutation_rate=rate,
        transitions=transitions,
        transversions=transversions,
        insertions=insertions,
        deletions=deletions,
    )
