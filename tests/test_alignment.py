"""Tests for global alignment and mutation classification."""

import pytest

from dnascope.exceptions import InvalidParameterError
from dnascope.utils import (
    Mutation,
    align_sequences,
    classify_mutations,
    classify_substitution,
    needleman_wunsch,
)


class TestNeedlemanWunsch:

    def test_gap_placed_in_shorter_sequence(self):
        assert needleman_wunsch("ATCG", "ATG") == ("ATCG", "AT-G", 4)

    def test_tie_break_prefers_diagonal_then_up(self):
        aligned1, aligned2, score = needleman_wunsch("AA", "A")

        assert (aligned1, aligned2) == ("AA", "-A")
        assert score == 0

    def test_tie_break_prefers_up_over_left(self):
        assert needleman_wunsch("ACA", "CAC") == ("-ACA", "CAC-", 0)

    def test_custom_scoring(self):
        aligned1, aligned2, score = needleman_wunsch(
            "ACGT", "ACGT", match_score=1, mismatch_score=0, gap_penalty=-1
        )

        assert aligned1 == aligned2 == "ACGT"
        assert score == 4

    def test_empty_inputs(self):
        assert needleman_wunsch("", "") == ("", "", 0)
        assert needleman_wunsch("", "AC") == ("--", "AC", -4)


class TestClassification:

    @pytest.mark.parametrize("base1,base2", [("A", "G"), ("G", "A"), ("C", "T"), ("T", "C")])
    def test_transitions(self, base1, base2):
        assert classify_substitution(base1, base2) == "transition"

    @pytest.mark.parametrize("base1,base2", [("A", "C"), ("A", "T"), ("G", "C"), ("T", "G")])
    def test_transversions(self, base1, base2):
        assert classify_substitution(base1, base2) == "transversion"

    def test_classify_mutations(self):
        mutations = classify_mutations("A-GTC", "ACG-T")

        assert mutations == [
            Mutation(1, "-", "C", "insertion"),
            Mutation(3, "T", "-", "deletion"),
            Mutation(4, "C", "T", "substitution", "transition"),
        ]

    def test_unequal_lengths(self):
        with pytest.raises(InvalidParameterError):
            classify_mutations("ACG", "AC")


class TestAlignSequences:

    @pytest.mark.parametrize("seq", ["A", "ATGC", "ATGAAATAAGGC"])
    def test_identical_sequences(self, seq):
        result = align_sequences(seq, seq)

        assert result.aligned_seq1 == result.aligned_seq2 == seq
        assert result.mutations == ()
        assert result.total_mutations == 0
        assert result.mutation_rate == 0

    def test_deletion(self):
        result = align_sequences("ATCG", "ATG")

        assert result.aligned_seq1 == "ATCG"
        assert result.aligned_seq2 == "AT-G"
        assert result.deletions == 1
        assert result.transitions == result.transversions == 0
        assert result.mutations == (Mutation(2, "C", "-", "deletion"),)
        assert result.mutation_rate == pytest.approx(25.0)

    def test_insertion(self):
        result = align_sequences("ATG", "ATCG")

        assert result.aligned_seq1 == "AT-G"
        assert result.aligned_seq2 == "ATCG"
        assert result.insertions == 1
        assert result.mutations == (Mutation(2, "-", "C", "insertion"),)

    def test_transition(self):
        result = align_sequences("ATGC", "ATAC")

        assert result.mutations == (Mutation(2, "G", "A", "substitution", "transition"),)
        assert result.transitions == 1
        assert result.score == 5

    def test_result_is_immutable(self):
        result = align_sequences("ATGC", "ATAC")

        assert isinstance(result.mutations, tuple)
        assert hash(result) == hash(align_sequences("ATGC", "ATAC"))
        with pytest.raises(AttributeError):
            result.mutations.clear()
        assert result.total_mutations == len(result.mutations) == 1

    def test_transversion(self):
        result = align_sequences("ATGC", "ATTC")

        assert result.transversions == 1
        assert result.mutations[0].classification == "transversion"

    def test_lowercase_input(self):
        result = align_sequences("atgc", "ATGC")

        assert result.aligned_seq1 == "ATGC"
        assert result.total_mutations == 0

    def test_all_deleted(self):
        result = align_sequences("ATG", "")

        assert result.aligned_seq2 == "---"
        assert result.deletions == 3
        assert result.mutation_rate == 100.0

    def test_both_empty(self):
        result = align_sequences("", "")

        assert result.aligned_seq1 == ""
        assert result.mutation_rate == 0

    @pytest.mark.parametrize("seq1,seq2", [
        ("ATGCGTACGTTAG", "ATGCCTACGTAG"),
        ("GATTACA", "GCATGCT"),
        ("AAAA", "TTTTTT"),
    ])
    def test_counts_partition_total(self, seq1, seq2):
        result = align_sequences(seq1, seq2)

        assert len(result.aligned_seq1) == len(result.aligned_seq2)
        assert result.aligned_seq1.replace("-", "") == seq1
        assert result.aligned_seq2.replace("-", "") == seq2
        assert (
            result.transitions + result.transversions + result.insertions + result.deletions
            == result.total_mutations
            == len(result.mutations)
        )

    def test_str_rendering(self):
        text = str(align_sequences("ATCG", "ATG"))

        assert text.splitlines()[:3] == ["ATCG", "|| |", "AT-G"]
        assert "Score: 4" in text
