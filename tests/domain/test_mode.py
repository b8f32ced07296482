"""Tests for RuntimeMode parsing and derived flags."""

import pytest

from envsnap.domain import RuntimeMode


class TestParse:
    """RuntimeMode.parse normalisation and fallback."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("production", RuntimeMode.PRODUCTION),
            ("PRODUCTION", RuntimeMode.PRODUCTION),
            (" test ", RuntimeMode.TEST),
            ("Development", RuntimeMode.DEVELOPMENT),
        ],
    )
    def test_known_values(self, raw, expected):
        assert RuntimeMode.parse(raw) is expected

    @pytest.mark.parametrize("raw", [None, "", "staging", "prod"])
    def test_unknown_or_missing_falls_back_to_development(self, raw):
        assert RuntimeMode.parse(raw) is RuntimeMode.DEVELOPMENT

    def test_is_known(self):
        assert RuntimeMode.is_known("Test")
        assert not RuntimeMode.is_known("staging")


class TestFlags:
    """Derived flags are mutually exclusive."""

    @pytest.mark.parametrize("mode", list(RuntimeMode))
    def test_exactly_one_flag_true(self, mode):
        flags = [mode.is_development, mode.is_test, mode.is_production]
        assert flags.count(True) == 1

    def test_flag_matches_mode(self):
        assert RuntimeMode.PRODUCTION.is_production
        assert RuntimeMode.TEST.is_test
        assert RuntimeMode.DEVELOPMENT.is_development
