"""envsnap - typed, immutable settings resolved from environment variables."""

from .app import App, create_app
from .domain import RuntimeMode, SettingsSnapshot
from .resolution import EnvResolver, build_snapshot, get_env, get_snapshot

__all__ = [
    "App",
    "create_app",
    "EnvResolver",
    "RuntimeMode",
    "SettingsSnapshot",
    "build_snapshot",
    "get_env",
    "get_snapshot",
]
