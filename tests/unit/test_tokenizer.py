"""Unit tests for the field tokenizer."""
import math

from vlint.parsing.tokenizer import NAN, field_at, is_number, parse_number, tokenize


class TestTokenize:

    def test_splits_on_every_colon(self):
        assert tokenize("warning: file.v:10:4: msg") == ["warning", " file.v", "10", "4", " msg"]

    def test_keeps_empty_fields(self):
        assert tokenize("a::b:") == ["a", "", "b", ""]

    def test_no_delimiter(self):
        assert tokenize("* consider removing it") == ["* consider removing it"]


class TestFieldAt:

    def test_trims(self):
        assert field_at([" main.v ", "3"], 0) == "main.v"

    def test_out_of_range_is_empty(self):
        assert field_at(["only"], 4) == ""

    def test_negative_index_is_empty(self):
        assert field_at(["only"], -1) == ""


class TestParseNumber:

    def test_plain_integer(self):
        assert parse_number("10") == 10

    def test_leading_whitespace(self):
        assert parse_number("  4") == 4

    def test_trailing_garbage_ignored(self):
        assert parse_number("12abc") == 12

    def test_non_numeric_is_nan(self):
        assert math.isnan(parse_number("abc"))

    def test_empty_is_nan_not_zero(self):
        value = parse_number("")
        assert value != 0
        assert math.isnan(value)

    def test_is_number(self):
        assert is_number(3)
        assert not is_number(NAN)
