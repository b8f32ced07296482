"""Tests for the mode-keyed defaults table."""

import pytest

from envsnap.config import MODE_DEFAULTS, defaults_for
from envsnap.domain import RuntimeMode


def test_every_mode_has_defaults():
    assert set(MODE_DEFAULTS) == set(RuntimeMode)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        MODE_DEFAULTS[RuntimeMode.TEST] = MODE_DEFAULTS[RuntimeMode.PRODUCTION]


@pytest.mark.parametrize(
    "mode,log_level",
    [
        (RuntimeMode.PRODUCTION, "info"),
        (RuntimeMode.TEST, "debug"),
        (RuntimeMode.DEVELOPMENT, "debug"),
    ],
)
def test_log_level_defaults(mode, log_level):
    assert defaults_for(mode).log_level == log_level


def test_origin_defaults():
    assert defaults_for(RuntimeMode.TEST).cors_origins == ("*",)
    assert defaults_for(RuntimeMode.PRODUCTION).cors_origins == (
        "https://your-production-domain.com",
    )
    assert "http://localhost:5173" in defaults_for(RuntimeMode.DEVELOPMENT).cors_origins
