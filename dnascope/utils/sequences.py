"""
Core sequence analysis utilities.

Functions for composition statistics, complementation, codon scanning,
translation and open reading frame detection on DNA sequences.
All functions expect a sequence that already passed validation.
"""

import itertools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List

from dnascope.exceptions import InvalidParameterError
from dnascope.utils.constants import (
    CODON_TABLE,
    DEFAULT_LINE_WIDTH,
    DNA_COMPLEMENT,
    START_CODON,
    STOP_CODONS,
    UNKNOWN_AMINO_ACID,
)

logger = logging.getLogger(__name__)

DEFAULT_MIN_ORF_LENGTH = 30
READING_FRAMES = (0, 1, 2)


@dataclass(frozen=True)
class SequenceStats:
    """
    Nucleotide composition of a sequence.

    Attributes:
        length: Number of bases
        count_a, count_t, count_c, count_g: Per-base counts
        gc_content: Percentage of G + C (0-100)
        at_content: Percentage of A + T (0-100)
    """
    length: int
    count_a: int
    count_t: int
    count_c: int
    count_g: int
    gc_content: float
    at_content: float


@dataclass(frozen=True)
class Codon:
    """A triplet read in frame, with its position in the source sequence."""
    sequence: str
    position: int
    amino_acid: str
    is_start: bool
    is_stop: bool


@dataclass(frozen=True)
class ORF:
    """
    An open reading frame.

    Attributes:
        id: Discovery index, 1-based, assigned before sorting
        start: 0-based start of the start codon
        end: 0-based inclusive end (stop codon end, or last base
            when the frame runs off the sequence)
        length: Number of nucleotides from start to end inclusive
        frame: Reading frame, 1, 2 or 3
        strand: "+" for the input, "-" for its reverse complement.
            Coordinates on "-" refer to the reverse complement string.
        sequence: Nucleotide span
        protein_sequence: Translation, without the stop symbol
    """
    id: int
    start: int
    end: int
    length: int
    frame: int
    strand: str
    sequence: str
    protein_sequence: str


class OrfScanState(Enum):
    SEARCHING = "searching"
    IN_ORF = "in_orf"


def _check_frame(frame: int) -> None:
    if frame not in READING_FRAMES:
        raise InvalidParameterError(f"Reading frame must be 0, 1 or 2, got {frame!r}")


def calculate_stats(sequence: str) -> SequenceStats:
    """
    Count bases and compute GC/AT content.

    Args:
        sequence: Validated DNA sequence

    Returns:
        SequenceStats with percentages; both are 0 for an empty sequence

    Example:
        >>> calculate_stats("ATGC").gc_content
        50.0
    """
    seq = sequence.upper()
    count_a = seq.count("A")
    count_t = seq.count("T")
    count_c = seq.count("C")
    count_g = seq.count("G")
    length = len(seq)

    if length > 0:
        gc = (count_g + count_c) / length * 100
        at = (count_a + count_t) / length * 100
    else:
        gc = at = 0.0

    return SequenceStats(
        length=length,
        count_a=count_a,
        count_t=count_t,
        count_c=count_c,
        count_g=count_g,
        gc_content=gc,
        at_content=at,
    )


def gc_content(sequence: str) -> float:
    """
    Calculate the GC content (fraction) of a sequence.

    Example:
        >>> gc_content("ACGT")
        0.5
    """
    return calculate_stats(sequence).gc_content / 100


def complement(sequence: str) -> str:
    """
    Complement each base, keeping the original order.

    Unknown characters pass through unchanged.

    Example:
        >>> complement("AACG")
        'TTGC'
    """
    return "".join(DNA_COMPLEMENT.get(base, base) for base in sequence.upper())


def reverse_complement(sequence: str) -> str:
    """
    Get the reverse complement (the antiparallel strand, read 5' to 3').

    Example:
        >>> reverse_complement("AACG")
        'CGTT'
    """
    return complement(sequence)[::-1]


def _iter_codons(sequence: str, frame: int) -> Iterator[Codon]:
    for i in range(frame, len(sequence) - 2, 3):
        triplet = sequence[i:i + 3]
        yield Codon(
            sequence=triplet,
            position=i,
            amino_acid=CODON_TABLE.get(triplet, UNKNOWN_AMINO_ACID),
            is_start=triplet == START_CODON,
            is_stop=triplet in STOP_CODONS,
        )


def get_codons(sequence: str, frame: int = 0) -> List[Codon]:
    """
    Split a sequence into codons in the given reading frame.

    Trailing bases that do not fill a codon are dropped.

    Args:
        sequence: DNA sequence
        frame: Offset of the first codon, 0, 1 or 2

    Returns:
        Codons in sequence order

    Raises:
        InvalidParameterError: If frame is not 0, 1 or 2

    Example:
        >>> [c.amino_acid for c in get_codons("ATGTAA")]
        ['M', '*']
    """
    _check_frame(frame)
    return list(_iter_codons(sequence.upper(), frame))


def translate(sequence: str, frame: int = 0) -> str:
    """
    Translate a whole reading frame to protein.

    Stop codons appear as '*' and translation continues past them.

    Example:
        >>> translate("ATGTAAGGC")
        'M*G'
    """
    return "".join(codon.amino_acid for codon in get_codons(sequence, frame))


def _scan_frame(
    seq: str,
    frame: int,
    strand: str,
    min_length: int,
    ids: Iterator[int]
) -> List[ORF]:
    """Run the start/stop state machine over one reading frame."""
    orfs = []
    state = OrfScanState.SEARCHING
    orf_start = 0
    protein: List[str] = []

    def emit(end: int) -> None:
        orf_seq = seq[orf_start:end + 1]
        if len(orf_seq) >= min_length:
            orfs.append(ORF(
                id=next(ids),
                start=orf_start,
                end=end,
                length=len(orf_seq),
                frame=frame + 1,
                strand=strand,
                sequence=orf_seq,
                protein_sequence="".join(protein),
            ))

    for codon in _iter_codons(seq, frame):
        if state is OrfScanState.SEARCHING:
            if codon.is_start:
                state = OrfScanState.IN_ORF
                orf_start = codon.position
                protein = [codon.amino_acid]
        elif codon.is_stop:
            emit(codon.position + 2)
            state = OrfScanState.SEARCHING
        else:
            # nested ATGs extend the current ORF
            protein.append(codon.amino_acid)

    if state is OrfScanState.IN_ORF:
        emit(len(seq) - 1)

    return orfs


def find_orfs(sequence: str, min_length: int = DEFAULT_MIN_ORF_LENGTH) -> List[ORF]:
    """
    Find Open Reading Frames (ORFs) on both strands in all three frames.

    Each frame is scanned once from its first codon. An ORF opens at the
    first ATG and closes at the next in-frame stop codon; an ATG inside an
    open ORF does not start a new one, so overlapping ORFs in the same
    frame are not reported. An ORF still open at the end of the sequence
    is reported up to the last base.

    Args:
        sequence: Validated DNA sequence
        min_length: Minimum ORF length in nucleotides, stop codon included

    Returns:
        ORFs sorted by length, longest first. Equal lengths keep discovery
        order: "+" strand frames 1-3, then "-" strand frames 1-3.

    Raises:
        InvalidParameterError: If min_length is negative

    Example:
        >>> orfs = find_orfs("ATGAAATAA", min_length=9)
        >>> orfs[0].protein_sequence
        'MK'
    """
    if min_length < 0:
        raise InvalidParameterError(f"min_length must be >= 0, got {min_length}")

    forward = sequence.upper()
    strands = (("+", forward), ("-", reverse_complement(forward)))
    ids = itertools.count(1)

    orfs: List[ORF] = []
    for strand, seq in strands:
        for frame in READING_FRAMES:
            orfs.extend(_scan_frame(seq, frame, strand, min_length, ids))

    logger.debug("Found %d ORFs >= %d nt in %d bp", len(orfs), min_length, len(forward))
    return sorted(orfs, key=lambda orf: -orf.length)


def format_sequence(sequence: str, line_length: int = DEFAULT_LINE_WIDTH) -> str:
    """
    Wrap a sequence into lines of at most ``line_length`` characters.

    Example:
        >>> format_sequence("ATGCATGC", line_length=3)
        'ATG\\nCAT\\nGC'
    """
    if line_length <= 0:
        raise InvalidParameterError(f"line_length must be positive, got {line_length}")

    return "\n".join(
        sequence[i:i + line_length] for i in range(0, len(sequence), line_length)
    )
