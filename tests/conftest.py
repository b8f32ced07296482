"""Pytest configuration and fixtures for envsnap tests."""

import pytest
from typer.testing import CliRunner

from envsnap.cli.app import create_cli_app
from envsnap.cli.state import CLIState
from envsnap.infrastructure.logging import reset_logging
from envsnap.providers import BaseEnvProvider, MappingProvider
from envsnap.resolution import EnvResolver, get_snapshot

SNAPSHOT_KEYS = (
    "NODE_ENV",
    "APP_ENV",
    "MODE",
    "PORT",
    "HOST",
    "API_BASE_PATH",
    "FRONTEND_URL",
    "CORS_ORIGINS",
    "CORS_METHODS",
    "CORS_HEADERS",
    "CORS_EXPOSE_HEADERS",
    "CORS_CREDENTIALS",
    "CORS_MAX_AGE",
    "AUTH0_DOMAIN",
    "AUTH0_CLIENT_ID",
    "AUTH0_CLIENT_SECRET",
    "AUTH0_REDIRECT_URI",
    "JWT_SECRET",
    "JWT_EXPIRES_IN",
    "JWT_ALGORITHM",
    "LOG_LEVEL",
)


class FailingProvider(BaseEnvProvider):
    """Provider whose source is always unreachable."""

    name = "failing"

    def __init__(self, error: Exception | None = None):
        self.error = error or RuntimeError("source unavailable")
        self.calls: list[str] = []

    def get(self, key: str) -> str | None:
        self.calls.append(key)
        raise self.error


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Remove settings variables and run from an empty directory.

    Keeps the developer's shell environment and any ``.env`` in the repo
    from leaking into resolution.
    """
    for key in SNAPSHOT_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_snapshot.cache_clear()
    yield
    get_snapshot.cache_clear()


@pytest.fixture
def failing_provider():
    return FailingProvider()


@pytest.fixture
def make_resolver():
    """Build a resolver over a single in-memory mapping."""

    def _make(**values: str) -> EnvResolver:
        return EnvResolver([MappingProvider(values)])

    return _make


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_app():
    """Provide CLI app resolving from the (cleaned) real environment."""
    return create_cli_app()


@pytest.fixture
def make_cli_app():
    """Provide a CLI app whose resolver reads only the given values."""

    def _make(**values: str):
        state = CLIState(EnvResolver([MappingProvider(values)]))
        return create_cli_app(state=state)

    return _make
