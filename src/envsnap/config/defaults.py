"""Default values used when an environment variable is absent.

Mode-dependent defaults live in a table keyed by RuntimeMode, so adding a
mode only means adding a row.
"""

import typing as t
from dataclasses import dataclass
from types import MappingProxyType

from ..domain.mode import RuntimeMode


@dataclass(frozen=True)
class ModeDefaults:
    """Defaults that differ between runtime modes."""

    frontend_url: str
    cors_origins: tuple[str, ...]
    log_level: str


_PRODUCTION_URL: t.Final = "https://your-production-domain.com"
_DEV_LAN_URL: t.Final = "http://192.168.31.177:8080"

MODE_DEFAULTS: t.Mapping[RuntimeMode, ModeDefaults] = MappingProxyType(
    {
        RuntimeMode.PRODUCTION: ModeDefaults(
            frontend_url=_PRODUCTION_URL,
            cors_origins=(_PRODUCTION_URL,),
            log_level="info",
        ),
        RuntimeMode.TEST: ModeDefaults(
            frontend_url="http://test-domain.com",
            cors_origins=("*",),
            log_level="debug",
        ),
        RuntimeMode.DEVELOPMENT: ModeDefaults(
            frontend_url=_DEV_LAN_URL,
            cors_origins=(
                "http://localhost:3000",
                "http://localhost:5173",
                "http://127.0.0.1:5173",
                "http://127.0.0.1:3000",
                _DEV_LAN_URL,
            ),
            log_level="debug",
        ),
    }
)


def defaults_for(mode: RuntimeMode) -> ModeDefaults:
    """Return the mode-dependent defaults for a runtime mode."""
    return MODE_DEFAULTS[mode]


# Server
DEFAULT_PORT: t.Final = 3000
DEFAULT_HOST: t.Final = "0.0.0.0"
DEFAULT_API_BASE_PATH: t.Final = "/api"

# CORS
DEFAULT_CORS_METHODS: t.Final = ("GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH")
DEFAULT_CORS_HEADERS: t.Final = (
    "Origin",
    "Content-Type",
    "Accept",
    "Authorization",
    "X-Requested-With",
)
DEFAULT_CORS_EXPOSE_HEADERS: t.Final = ("Content-Length", "X-Kuma-Revision")
DEFAULT_CORS_CREDENTIALS: t.Final = True
DEFAULT_CORS_MAX_AGE: t.Final = 86400

# Auth0 placeholders
DEFAULT_AUTH0_DOMAIN: t.Final = "your-auth0-domain.auth0.com"
DEFAULT_AUTH0_CLIENT_ID: t.Final = "your-client-id"
DEFAULT_AUTH0_CLIENT_SECRET: t.Final = "your-client-secret"
DEFAULT_AUTH0_REDIRECT_URI: t.Final = "http://localhost:3000/api/auth/callback"

# JWT
DEFAULT_JWT_SECRET: t.Final = "your-secret-key-change-in-production"
DEFAULT_JWT_EXPIRES_IN: t.Final = "24h"
DEFAULT_JWT_ALGORITHM: t.Final = "HS256"
