"""Logging setup built on loguru.

Handlers are installed only by ``configure_logger``/``setup_logging``,
which ``create_app`` calls at startup. ``get_logger`` just binds a name, so
resolving settings never touches sinks the host application installed.
``reset_logging`` puts the module back into its unconfigured state for
test isolation.
"""

import enum
import sys
import typing as t

from loguru import logger

from ..domain.mode import RuntimeMode

if t.TYPE_CHECKING:
    import loguru

    from ..domain.snapshot import SettingsSnapshot


class LogLevel(enum.StrEnum):
    """Log levels understood by loguru."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def coerce(cls, value: "str | LogLevel") -> "LogLevel":
        """Accept a level name in any case, falling back to INFO."""
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return cls.INFO


_DEVELOPMENT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)
_PLAIN_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]} - {message}"

_configured = False


def configure_logger(
    level: "LogLevel | str" = LogLevel.INFO,
    mode: RuntimeMode = RuntimeMode.PRODUCTION,
) -> None:
    """Replace loguru's handlers with a single stderr sink.

    Development gets a colourised format with diagnostics; other modes get
    a plain format without variable values in tracebacks.
    """
    global _configured

    development = mode.is_development
    logger.remove()
    logger.configure(extra={"name": "envsnap"})
    logger.add(
        sys.stderr,
        level=LogLevel.coerce(level).value,
        format=_DEVELOPMENT_FORMAT if development else _PLAIN_FORMAT,
        colorize=development,
        backtrace=development,
        diagnose=development,
    )
    _configured = True


def setup_logging(snapshot: "SettingsSnapshot") -> None:
    """Configure logging from a resolved settings snapshot."""
    configure_logger(level=snapshot.log_level, mode=snapshot.mode)


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to ``name`` without altering handlers."""
    return logger.bind(name=name)


def is_configured() -> bool:
    return _configured


def reset_logging() -> None:
    """Drop all handlers and mark logging as unconfigured."""
    global _configured

    logger.remove()
    _configured = False
