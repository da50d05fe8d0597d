#!/usr/bin/env python3
"""
Example: Sequence Analysis with DNAScope

This example walks through the analysis engine the way an
interactive front end would call it:
- Parsing and validating pasted FASTA text
- Composition statistics
- Complement strands and reading-frame codons
- Finding ORFs on both strands
- Aligning two sequences and classifying mutations
"""

import logging
import sys
sys.path.insert(0, '..')

from dnascope.io import parse_fasta
from dnascope.sequence import validate_dna_sequence
from dnascope.utils import (
    amino_acid_class,
    calculate_stats,
    complement,
    reverse_complement,
    get_codons,
    translate,
    find_orfs,
    format_sequence,
)
from dnascope.utils.alignment import align_sequences

PASTED_INPUT = """>demo_gene partial CDS
ATGGTGAGCAAGGGCGAGGAGCTGTTCACCGGGGTGGTGCCCATCCTGGTCGAGCTGGAC
GGCGACGTAAACGGCCACAAGTTCAGCGTGTCCGGCGAGGGCGAGGGCGATGCCACCTAC
GGCAAGCTGACCCTGAAGTTCATCTGA
"""


def demo_input():
    """Demonstrate parsing and validation."""
    print("\n" + "=" * 60)
    print("INPUT")
    print("=" * 60)

    record = parse_fasta(PASTED_INPUT)
    print(f"\nHeader: {record.header}")
    print(f"Length: {len(record)} bp")

    result = validate_dna_sequence(record.sequence)
    print(f"Valid: {result.is_valid}")

    bad = validate_dna_sequence("ATGNNXCG")
    print(f"\nValidating 'ATGNNXCG': {bad.message}")

    return record.sequence


def demo_statistics(seq):
    """Demonstrate composition statistics."""
    print("\n" + "=" * 60)
    print("COMPOSITION")
    print("=" * 60)

    stats = calculate_stats(seq)
    print(f"\nA: {stats.count_a}  T: {stats.count_t}  C: {stats.count_c}  G: {stats.count_g}")
    print(f"GC Content: {stats.gc_content:.2f}%")
    print(f"AT Content: {stats.at_content:.2f}%")


def demo_strands(seq):
    """Demonstrate complement and reverse complement."""
    print("\n" + "=" * 60)
    print("STRANDS")
    print("=" * 60)

    head = seq[:30]
    print(f"\nOriginal:   5'-{head}-3'")
    print(f"Complement: 3'-{complement(head)}-5'")
    print(f"Rev Comp:   5'-{reverse_complement(head)}-3'")


def demo_codons(seq):
    """Demonstrate codon scanning and translation."""
    print("\n" + "=" * 60)
    print("READING FRAMES")
    print("=" * 60)

    print("\nFirst codons of frame 1:")
    for codon in get_codons(seq, 0)[:6]:
        flag = " (start)" if codon.is_start else " (stop)" if codon.is_stop else ""
        print(f"  {codon.position:>3}  {codon.sequence}  {codon.amino_acid}"
              f"  {amino_acid_class(codon.amino_acid)}{flag}")

    for frame in range(3):
        protein = translate(seq, frame)
        print(f"\nFrame {frame + 1} ({len(protein)} aa):")
        print(format_sequence(protein, line_length=50))


def demo_orfs(seq):
    """Demonstrate ORF finding."""
    print("\n" + "=" * 60)
    print("ORF FINDING")
    print("=" * 60)

    orfs = find_orfs(seq, min_length=30)

    print(f"\nFound {len(orfs)} ORF(s) >= 30 nt:")
    for orf in orfs:
        print(f"\n  #{orf.id} strand {orf.strand} frame {orf.frame}: "
              f"{orf.start}-{orf.end} ({orf.length} nt)")
        print(f"  Protein: {orf.protein_sequence}")


def demo_alignment():
    """Demonstrate alignment and mutation classification."""
    print("\n" + "=" * 60)
    print("SEQUENCE COMPARISON")
    print("=" * 60)

    reference = "ATGGCCATTGTAATGGGCCGCTGAAAGGGTGCCCGATAG"
    variant = "ATGGCTATTGTAATGGCCGCTGAAAGGGTACCCGATCAG"

    result = align_sequences(reference, variant)
    print()
    print(result)

    print(f"\nTransitions:   {result.transitions}")
    print(f"Transversions: {result.transversions}")
    print(f"Insertions:    {result.insertions}")
    print(f"Deletions:     {result.deletions}")

    print("\nMutations:")
    for mutation in result.mutations:
        kind = mutation.classification or mutation.type
        print(f"  Position {mutation.position}: "
              f"{mutation.original} -> {mutation.mutated} ({kind})")


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    print("=" * 60)
    print("DNAScope Sequence Analysis Demo")
    print("=" * 60)

    seq = demo_input()
    demo_statistics(seq)
    demo_strands(seq)
    demo_codons(seq)
    demo_orfs(seq)
    demo_alignment()

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
