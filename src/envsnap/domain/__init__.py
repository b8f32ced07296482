"""Domain models - runtime mode, snapshot and exceptions."""

from .exceptions import EnvSnapError, ProviderUnavailableError, UnknownSettingError
from .mode import RuntimeMode
from .snapshot import (
    Auth0Settings,
    CorsSettings,
    JwtSettings,
    ServerSettings,
    SettingsSnapshot,
    SettingValue,
)

__all__ = [
    "RuntimeMode",
    "SettingsSnapshot",
    "SettingValue",
    "ServerSettings",
    "CorsSettings",
    "Auth0Settings",
    "JwtSettings",
    "EnvSnapError",
    "ProviderUnavailableError",
    "UnknownSettingError",
]
