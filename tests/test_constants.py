"""Tests for genetic code tables."""

from itertools import product

from dnascope.utils import CODON_TABLE, STOP_CODONS, amino_acid_class
from dnascope.utils.constants import AMINO_ACID_PROPERTIES, DNA_COMPLEMENT


def test_codon_table_is_total():
    assert set(CODON_TABLE) == {"".join(c) for c in product("ACGT", repeat=3)}


def test_stop_codons_translate_to_stop_symbol():
    assert {codon for codon, aa in CODON_TABLE.items() if aa == "*"} == STOP_CODONS


def test_every_residue_has_properties():
    assert set(CODON_TABLE.values()) <= set(AMINO_ACID_PROPERTIES)


def test_amino_acid_class():
    assert amino_acid_class("L") == "hydrophobic"
    assert amino_acid_class("d") == "negative"
    assert amino_acid_class("*") == "special"
    assert amino_acid_class("?") == "unknown"


def test_complement_is_symmetric():
    assert all(DNA_COMPLEMENT[DNA_COMPLEMENT[b]] == b for b in "ACGT")
