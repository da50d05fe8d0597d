"""
Genetic code tables and nucleotide classes.

Static lookup data shared by the sequence and alignment utilities.
"""

from typing import Dict, NamedTuple

# Standard genetic code (DNA codons)
CODON_TABLE = {
    "TTT": "F", "TTC": "F", "TTA": "L", "TTG": "L",
    "TCT": "S", "TCC": "S", "TCA": "S", "TCG": "S",
    "TAT": "Y", "TAC": "Y", "TAA": "*", "TAG": "*",
    "TGT": "C", "TGC": "C", "TGA": "*", "TGG": "W",
    "CTT": "L", "CTC": "L", "CTA": "L", "CTG": "L",
    "CCT": "P", "CCC": "P", "CCA": "P", "CCG": "P",
    "CAT": "H", "CAC": "H", "CAA": "Q", "CAG": "Q",
    "CGT": "R", "CGC": "R", "CGA": "R", "CGG": "R",
    "ATT": "I", "ATC": "I", "ATA": "I", "ATG": "M",
    "ACT": "T", "ACC": "T", "ACA": "T", "ACG": "T",
    "AAT": "N", "AAC": "N", "AAA": "K", "AAG": "K",
    "AGT": "S", "AGC": "S", "AGA": "R", "AGG": "R",
    "GTT": "V", "GTC": "V", "GTA": "V", "GTG": "V",
    "GCT": "A", "GCC": "A", "GCA": "A", "GCG": "A",
    "GAT": "D", "GAC": "D", "GAA": "E", "GAG": "E",
    "GGT": "G", "GGC": "G", "GGA": "G", "GGG": "G",
}

START_CODON = "ATG"
START_CODONS = {START_CODON}
STOP_CODONS = {"TAA", "TAG", "TGA"}
UNKNOWN_AMINO_ACID = "?"

# DNA complement mapping
DNA_COMPLEMENT = {"A": "T", "T": "A", "C": "G", "G": "C"}

DNA_ALPHABET = frozenset("ATCG")

# Purines and pyrimidines for mutation classification
PURINES = ("A", "G")
PYRIMIDINES = ("C", "T")

GAP = "-"
DEFAULT_FASTA_HEADER = "Unnamed Sequence"
DEFAULT_LINE_WIDTH = 60


class AminoAcidInfo(NamedTuple):
    """Chemical class and names of a single residue."""
    type: str
    name: str
    abbreviation: str


AMINO_ACID_PROPERTIES: Dict[str, AminoAcidInfo] = {
    "A": AminoAcidInfo("hydrophobic", "Alanine", "Ala"),
    "V": AminoAcidInfo("hydrophobic", "Valine", "Val"),
    "I": AminoAcidInfo("hydrophobic", "Isoleucine", "Ile"),
    "L": AminoAcidInfo("hydrophobic", "Leucine", "Leu"),
    "M": AminoAcidInfo("hydrophobic", "Methionine", "Met"),
    "F": AminoAcidInfo("hydrophobic", "Phenylalanine", "Phe"),
    "W": AminoAcidInfo("hydrophobic", "Tryptophan", "Trp"),
    "P": AminoAcidInfo("hydrophobic", "Proline", "Pro"),
    "G": AminoAcidInfo("special", "Glycine", "Gly"),
    "S": AminoAcidInfo("polar", "Serine", "Ser"),
    "T": AminoAcidInfo("polar", "Threonine", "Thr"),
    "C": AminoAcidInfo("polar", "Cysteine", "Cys"),
    "Y": AminoAcidInfo("polar", "Tyrosine", "Tyr"),
    "N": AminoAcidInfo("polar", "Asparagine", "Asn"),
    "Q": AminoAcidInfo("polar", "Glutamine", "Gln"),
    "K": AminoAcidInfo("positive", "Lysine", "Lys"),
    "R": AminoAcidInfo("positive", "Arginine", "Arg"),
    "H": AminoAcidInfo("positive", "Histidine", "His"),
    "D": AminoAcidInfo("negative", "Aspartic acid", "Asp"),
    "E": AminoAcidInfo("negative", "Glutamic acid", "Glu"),
    "*": AminoAcidInfo("special", "Stop", "Stop"),
}


def amino_acid_class(residue: str) -> str:
    """
    Look up the chemical class of a one-letter residue code.

    Example:
        >>> amino_acid_class("K")
        'positive'
        >>> amino_acid_class("?")
        'unknown'
    """
    info = AMINO_ACID_PROPERTIES.get(residue.upper())
    if info is None:
        return "unknown"
    return info.type
