"""
Tests for input parsing helpers
"""

import datetime

import pytest

from core.errors import InvalidInputError
from core.utils import month_name, parse_bool, parse_fee, parse_int, parse_iso_date


class TestParsing:

    @pytest.mark.parametrize("text,expected", [
        ("true", True), ("TRUE", True), ("yes", True), ("y", True),
        ("false", False), ("No", False), (" n ", False), ("0", False),
    ])
    def test_parse_bool(self, text, expected):
        assert parse_bool(text) is expected

    def test_parse_bool_rejects_other_words(self):
        with pytest.raises(InvalidInputError):
            parse_bool("maybe")

    def test_parse_int_range(self):
        assert parse_int(" 7 ", 1, 12) == 7
        with pytest.raises(InvalidInputError):
            parse_int("13", 1, 12)
        with pytest.raises(InvalidInputError):
            parse_int("0", 1, 12)
        with pytest.raises(InvalidInputError):
            parse_int("seven")

    def test_parse_fee(self):
        assert parse_fee("20") == 20.0
        with pytest.raises(InvalidInputError):
            parse_fee("-1")
        with pytest.raises(InvalidInputError):
            parse_fee("twenty")

    @pytest.mark.parametrize("text", ["nan", "NaN", "inf", "-inf", "1e999"])
    def test_parse_fee_rejects_non_finite(self, text):
        with pytest.raises(InvalidInputError):
            parse_fee(text)

    def test_parse_iso_date(self):
        assert parse_iso_date("2024-02-29") == datetime.date(2024, 2, 29)
        with pytest.raises(InvalidInputError):
            parse_iso_date("2023-02-29")

    def test_month_name(self):
        assert month_name(1) == "January"
        assert month_name(12) == "December"
