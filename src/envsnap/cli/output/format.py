"""Rendering helpers for resolved settings."""

import typing as t

from ...domain.snapshot import SettingValue

SECRET_KEYS: t.Final = frozenset({"AUTH0_CLIENT_SECRET", "JWT_SECRET"})
MASK: t.Final = "********"


def format_value(value: SettingValue) -> str:
    """Render a setting the way it would be written in the environment."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, tuple):
        return ",".join(value)
    return str(value)


def format_line(key: str, value: SettingValue, reveal: bool = False) -> str:
    if key in SECRET_KEYS and not reveal:
        return f"{key}={MASK}"
    return f"{key}={format_value(value)}"
