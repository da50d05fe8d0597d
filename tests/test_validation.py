"""Tests for sequence cleaning and validation."""

import pytest

from dnascope.exceptions import (
    EmptySequenceError,
    InvalidCharactersError,
    SequenceError,
)
from dnascope.sequence import clean_sequence, validate_dna_sequence


class TestCleanSequence:

    def test_strips_whitespace_and_uppercases(self):
        assert clean_sequence(" atg c\n\tgt \r\n") == "ATGCGT"

    def test_empty(self):
        assert clean_sequence("   ") == ""


class TestValidateDNASequence:

    def test_valid_sequence(self):
        result = validate_dna_sequence("ATGCATGC")

        assert result.is_valid is True
        assert result.error is None
        assert result.message is None
        assert bool(result) is True

    def test_lowercase_and_whitespace_accepted(self):
        assert validate_dna_sequence("atg\ncat gc").is_valid

    @pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
    def test_empty_sequence(self, raw):
        result = validate_dna_sequence(raw)

        assert result.is_valid is False
        assert isinstance(result.error, EmptySequenceError)
        assert result.message == "Sequence is empty"

    def test_invalid_character_reported(self):
        result = validate_dna_sequence("ATGX")

        assert not result
        assert isinstance(result.error, InvalidCharactersError)
        assert result.error.chars == ("X",)
        assert "X" in result.message

    def test_invalid_characters_distinct_in_first_appearance_order(self):
        result = validate_dna_sequence("ATNGXNUX")

        assert result.error.chars == ("N", "X", "U")
        assert result.message == (
            "Invalid characters found: N, X, U. Only A, T, C, G are allowed."
        )

    def test_lowercase_invalid_reported_uppercase(self):
        result = validate_dna_sequence("atgn")

        assert result.error.chars == ("N",)

    def test_errors_are_returned_not_raised(self):
        result = validate_dna_sequence("123")

        assert result.is_valid is False
        assert result.error.chars == ("1", "2", "3")

    def test_raise_for_error(self):
        with pytest.raises(SequenceError):
            validate_dna_sequence("ATGZ").raise_for_error()

        validate_dna_sequence("ATG").raise_for_error()

    def test_errors_are_value_errors(self):
        assert isinstance(validate_dna_sequence("").error, ValueError)
