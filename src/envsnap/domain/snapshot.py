"""Settings snapshot domain models.

All models are frozen: a snapshot is resolved once and only read afterwards.
Sequence-valued settings are stored as tuples so their contents cannot be
mutated through a shared reference either.
"""

import typing as t

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import UnknownSettingError
from .mode import RuntimeMode

SettingValue: t.TypeAlias = str | int | bool | tuple[str, ...]


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class ServerSettings(_FrozenModel):
    """Network binding and public URLs."""

    port: int = Field(description="Port the API server listens on")
    host: str = Field(description="Interface the API server binds to")
    api_base_path: str = Field(description="Path prefix for API routes")
    frontend_url: str = Field(description="Base URL of the frontend app")


class CorsSettings(_FrozenModel):
    """Cross-origin resource sharing policy."""

    origins: tuple[str, ...] = Field(description="Allowed request origins")
    methods: tuple[str, ...] = Field(description="Allowed HTTP methods")
    headers: tuple[str, ...] = Field(description="Allowed request headers")
    expose_headers: tuple[str, ...] = Field(
        description="Response headers visible to the browser"
    )
    credentials: bool = Field(description="Whether credentials are allowed")
    max_age: int = Field(description="Preflight cache lifetime in seconds")


class Auth0Settings(_FrozenModel):
    """Identity provider credentials."""

    domain: str
    client_id: str
    client_secret: str
    redirect_uri: str


class JwtSettings(_FrozenModel):
    """Token signing parameters."""

    secret: str
    expires_in: str
    algorithm: str


class SettingsSnapshot(_FrozenModel):
    """Fully resolved, immutable configuration for one process."""

    mode: RuntimeMode = Field(description="Active runtime mode")
    server: ServerSettings
    cors: CorsSettings
    auth0: Auth0Settings
    jwt: JwtSettings
    log_level: str = Field(description="Logging verbosity name")

    @property
    def is_development(self) -> bool:
        return self.mode.is_development

    @property
    def is_test(self) -> bool:
        return self.mode.is_test

    @property
    def is_production(self) -> bool:
        return self.mode.is_production

    def flatten(self) -> dict[str, SettingValue]:
        """Return resolved values keyed by their environment variable name."""
        return {
            "NODE_ENV": self.mode.value,
            "PORT": self.server.port,
            "HOST": self.server.host,
            "API_BASE_PATH": self.server.api_base_path,
            "FRONTEND_URL": self.server.frontend_url,
            "CORS_ORIGINS": self.cors.origins,
            "CORS_METHODS": self.cors.methods,
            "CORS_HEADERS": self.cors.headers,
            "CORS_EXPOSE_HEADERS": self.cors.expose_headers,
            "CORS_CREDENTIALS": self.cors.credentials,
            "CORS_MAX_AGE": self.cors.max_age,
            "AUTH0_DOMAIN": self.auth0.domain,
            "AUTH0_CLIENT_ID": self.auth0.client_id,
            "AUTH0_CLIENT_SECRET": self.auth0.client_secret,
            "AUTH0_REDIRECT_URI": self.auth0.redirect_uri,
            "JWT_SECRET": self.jwt.secret,
            "JWT_EXPIRES_IN": self.jwt.expires_in,
            "JWT_ALGORITHM": self.jwt.algorithm,
            "LOG_LEVEL": self.log_level,
        }

    def value_for(self, key: str) -> SettingValue:
        """Look up a single resolved value by environment variable name.

        Raises:
            UnknownSettingError: If the key is not part of the snapshot.
        """
        flat = self.flatten()
        normalized = key.strip().upper()
        if normalized not in flat:
            raise UnknownSettingError(key)
        return flat[normalized]
