"""Unit tests for document parsing."""

import pytest

from jsontree.core.document import parse_document
from jsontree.core.exceptions import InvalidJsonError


class TestParseDocument:
    def test_valid_object_keeps_key_order(self):
        result = parse_document('{"b": 1, "a": 2, "10": 3}')
        assert result.is_ok()
        assert list(result.unwrap().keys()) == ["b", "a", "10"]

    @pytest.mark.parametrize("text, expected", [
        ("null", None),
        ("true", True),
        ("42", 42),
        ('"hi"', "hi"),
        ("[1, [2]]", [1, [2]]),
    ])
    def test_valid_values(self, text, expected):
        assert parse_document(text).unwrap() == expected

    def test_syntax_error_reports_location(self):
        result = parse_document('{\n  "a": 1,\n  oops\n}')
        assert result.is_err()
        error = result.unwrap_err()
        assert isinstance(error, InvalidJsonError)
        assert error.line == 3
        assert "line 3" in str(error)

    @pytest.mark.parametrize("text", ["", "   ", "{", "[1,]", "{'a': 1}", "undefined"])
    def test_invalid_text(self, text):
        assert parse_document(text).is_err()

    @pytest.mark.parametrize("text", ["NaN", "[Infinity]", '{"a": -Infinity}'])
    def test_non_standard_constants_rejected(self, text):
        result = parse_document(text)
        assert result.is_err()
        assert "Non-standard JSON constant" in str(result.unwrap_err())

    def test_non_text_input(self):
        result = parse_document(None)
        assert result.is_err()
        assert "NoneType" in str(result.unwrap_err())

    @pytest.mark.parametrize("text", ["1e400", "[-1e999]", '{"a": 2.5e308}'])
    def test_out_of_range_numbers_rejected(self, text):
        result = parse_document(text)
        assert result.is_err()
        assert "Number out of range" in str(result.unwrap_err())

    def test_small_exponent_is_accepted(self):
        assert parse_document("1e-7").unwrap() == 1e-7
