import gzip
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

from dnascope.sequence.validation import clean_sequence
from dnascope.utils.constants import DEFAULT_FASTA_HEADER, DEFAULT_LINE_WIDTH
from dnascope.utils.sequences import format_sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FastaRecord:
    """
    Represents a single FASTA record.

    Attributes:
        id: Sequence identifier (first word after '>')
        description: Full description line (everything after '>')
        sequence: The nucleotide sequence, uppercase with whitespace removed
    """
    id: str
    description: str
    sequence: str

    @property
    def header(self) -> str:
        return self.description

    def __len__(self) -> int:
        return len(self.sequence)

    def __str__(self) -> str:
        return f">{self.description}\n{self.sequence}"

    def to_fasta(self, line_width: int = DEFAULT_LINE_WIDTH) -> str:
        """Format as FASTA string with wrapped sequence lines."""
        body = format_sequence(self.sequence, line_width)
        if not body:
            return f">{self.description}"
        return f">{self.description}\n{body}"


def _open_file(filepath: Union[str, Path], mode: str = "rt"):
    """Open a file, handling gzip compression if needed."""
    filepath = Path(filepath)
    if filepath.suffix == ".gz":
        return gzip.open(filepath, mode)
    return open(filepath, mode)


def parse_fasta(content: str) -> FastaRecord:
    """
    Parse a single-record FASTA string, or raw sequence text.

    Every line starting with '>' sets the header (the last one wins); all
    other lines are concatenated into the sequence. Input that does not
    start with '>' and has no header line is taken as raw sequence text
    in its entirety and named "Unnamed Sequence".

    No validation is performed; pass the sequence to
    ``validate_dna_sequence`` before analysis.

    Args:
        content: FASTA formatted string or bare sequence

    Returns:
        FastaRecord

    Example:
        >>> record = parse_fasta(">seq1 test\\nATG\\ncgt")
        >>> record.header, record.sequence
        ('seq1 test', 'ATGCGT')
    """
    header = ""
    sequence_parts = []

    for line in content.strip().split("\n"):
        line = line.strip()
        if line.startswith(">"):
            header = line[1:].strip()
        else:
            sequence_parts.append(clean_sequence(line))

    sequence = "".join(sequence_parts)

    if not header and not content.strip().startswith(">"):
        sequence = clean_sequence(content)
        header = DEFAULT_FASTA_HEADER

    seq_id = header.split()[0] if header else ""
    logger.debug("Parsed FASTA record %r (%d bp)", seq_id, len(sequence))
    return FastaRecord(id=seq_id, description=header, sequence=sequence)


def read_fasta(filepath: Union[str, Path]) -> FastaRecord:
    """
    Read a single-record FASTA file.

    Supports both plain text and gzip-compressed files.

    Args:
        filepath: Path to FASTA file (.fasta, .fa, .fna, or .gz)

    Returns:
        FastaRecord parsed with ``parse_fasta``
    """
    with _open_file(filepath, "rt") as f:
        return parse_fasta(f.read())


def write_fasta(
    records: Union[FastaRecord, Iterable[FastaRecord]],
    filepath: Union[str, Path],
    line_width: int = DEFAULT_LINE_WIDTH,
    compress: bool = False
) -> None:
    """
    Write sequences to a FASTA file.

    Args:
        records: Single record or iterable of FastaRecord objects
        filepath: Output file path
        line_width: Number of characters per sequence line
        compress: If True, write gzip-compressed file

    Example:
        >>> records = [FastaRecord("seq1", "seq1 example", "ACGT")]
        >>> write_fasta(records, "output.fasta")
    """
    if isinstance(records, FastaRecord):
        records = [records]

    filepath = Path(filepath)
    if compress and not filepath.suffix == ".gz":
        filepath = Path(str(filepath) + ".gz")

    opener = gzip.open if filepath.suffix == ".gz" else open

    with opener(filepath, "wt") as f:
        for record in records:
            f.write(record.to_fasta(line_width) + "\n")
