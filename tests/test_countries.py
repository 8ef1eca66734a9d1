"""Tests for relay/countries.py"""

from __future__ import annotations

import pytest

from relay.countries import COUNTRY_NAMES, resolve_country


class TestResolveCountry:
    @pytest.mark.parametrize(
        "code, expected",
        [
            ("GB", "United Kingdom"),
            ("US", "United States"),
            ("CZ", "Czech Republic"),
            ("CI", "Côte d'Ivoire"),
            ("ST", "São Tomé and Príncipe"),
        ],
    )
    def test_known_codes(self, code, expected):
        assert resolve_country(code) == expected

    def test_lowercase_code(self):
        assert resolve_country("gr") == "Greece"

    def test_unknown_code_returned_unchanged(self):
        assert resolve_country("ZZ") == "ZZ"

    def test_empty_and_none(self):
        assert resolve_country("") is None
        assert resolve_country(None) is None

    def test_table_size(self):
        assert len(COUNTRY_NAMES) > 190
        assert all(len(code) == 2 and code.isupper() for code in COUNTRY_NAMES)
