from envsnap.app import App, create_app
from envsnap.domain import RuntimeMode, SettingsSnapshot
from envsnap.infrastructure.logging import get_logger, is_configured
from envsnap.providers import MappingProvider
from envsnap.resolution import EnvResolver, build_snapshot


def test_create_app_resolves_snapshot_from_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    app = create_app()

    assert isinstance(app, App)
    assert isinstance(app.snapshot, SettingsSnapshot)
    assert app.snapshot.mode is RuntimeMode.PRODUCTION
    assert app.snapshot.log_level == "info"


def test_create_app_with_explicit_snapshot():
    snapshot = build_snapshot(EnvResolver([MappingProvider({"APP_ENV": "test"})]))
    app = create_app(snapshot=snapshot)
    assert app.snapshot is snapshot


def test_create_app_with_resolver():
    resolver = EnvResolver([MappingProvider({"PORT": "7000"})])
    app = create_app(resolver=resolver)
    assert app.snapshot.server.port == 7000


def test_create_app_configures_logging():
    """Logging is configured as part of startup (autouse fixture resets it)."""
    assert is_configured() is False
    _ = create_app()
    assert is_configured() is True


def test_logger_usable_after_create_app():
    app = create_app(resolver=EnvResolver([MappingProvider({"LOG_LEVEL": "critical"})]))
    assert app.snapshot.log_level == "critical"

    logger = get_logger(__name__)
    logger.critical("Test critical message - should appear")
    logger.info("Test info message - should be filtered out")
