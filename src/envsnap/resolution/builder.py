"""Assembles a SettingsSnapshot from resolved environment values."""

from ..config import defaults
from ..domain.mode import RuntimeMode
from ..domain.snapshot import (
    Auth0Settings,
    CorsSettings,
    JwtSettings,
    ServerSettings,
    SettingsSnapshot,
)
from ..infrastructure.logging import get_logger
from .resolver import EnvResolver


def build_snapshot(
    resolver: EnvResolver | None = None,
    mode: RuntimeMode | None = None,
) -> SettingsSnapshot:
    """Resolve every setting and return an immutable snapshot.

    Args:
        resolver: Resolver to read values through. Defaults to the process
            environment followed by ``.env``.
        mode: Runtime mode to apply. Resolved from the environment when
            omitted.

    Returns:
        A fully populated SettingsSnapshot. Absent variables take their
        documented default, which for some fields depends on the mode.
    """
    resolver = resolver or EnvResolver()
    mode = mode or resolver.resolve_mode()
    mode_defaults = defaults.defaults_for(mode)

    snapshot = SettingsSnapshot(
        mode=mode,
        server=ServerSettings(
            port=resolver.get_number("PORT", defaults.DEFAULT_PORT),
            host=resolver.get_string("HOST", defaults.DEFAULT_HOST),
            api_base_path=resolver.get_string(
                "API_BASE_PATH", defaults.DEFAULT_API_BASE_PATH
            ),
            frontend_url=resolver.get_string(
                "FRONTEND_URL", mode_defaults.frontend_url
            ),
        ),
        cors=CorsSettings(
            origins=resolver.get_array("CORS_ORIGINS", mode_defaults.cors_origins),
            methods=resolver.get_array("CORS_METHODS", defaults.DEFAULT_CORS_METHODS),
            headers=resolver.get_array("CORS_HEADERS", defaults.DEFAULT_CORS_HEADERS),
            expose_headers=resolver.get_array(
                "CORS_EXPOSE_HEADERS", defaults.DEFAULT_CORS_EXPOSE_HEADERS
            ),
            credentials=resolver.get_boolean(
                "CORS_CREDENTIALS", defaults.DEFAULT_CORS_CREDENTIALS
            ),
            max_age=resolver.get_number("CORS_MAX_AGE", defaults.DEFAULT_CORS_MAX_AGE),
        ),
        auth0=Auth0Settings(
            domain=resolver.get_string("AUTH0_DOMAIN", defaults.DEFAULT_AUTH0_DOMAIN),
            client_id=resolver.get_string(
                "AUTH0_CLIENT_ID", defaults.DEFAULT_AUTH0_CLIENT_ID
            ),
            client_secret=resolver.get_string(
                "AUTH0_CLIENT_SECRET", defaults.DEFAULT_AUTH0_CLIENT_SECRET
            ),
            redirect_uri=resolver.get_string(
                "AUTH0_REDIRECT_URI", defaults.DEFAULT_AUTH0_REDIRECT_URI
            ),
        ),
        jwt=JwtSettings(
            secret=resolver.get_string("JWT_SECRET", defaults.DEFAULT_JWT_SECRET),
            expires_in=resolver.get_string(
                "JWT_EXPIRES_IN", defaults.DEFAULT_JWT_EXPIRES_IN
            ),
            algorithm=resolver.get_string(
                "JWT_ALGORITHM", defaults.DEFAULT_JWT_ALGORITHM
            ),
        ),
        log_level=resolver.get_string("LOG_LEVEL", mode_defaults.log_level),
    )

    get_logger(__name__).debug(f"Resolved settings snapshot for mode={mode.value}")
    return snapshot
