"""Process-wide snapshot access and the legacy string accessor."""

from functools import lru_cache

from ..domain.snapshot import SettingsSnapshot
from .builder import build_snapshot
from .resolver import EnvResolver


@lru_cache(maxsize=1)
def get_snapshot() -> SettingsSnapshot:
    """Return the process-wide snapshot, building it on first access.

    Prefer ``create_app`` and passing ``app.snapshot`` explicitly; this is
    for code that cannot receive it. Call ``get_snapshot.cache_clear()`` in
    tests to force a rebuild.
    """
    return build_snapshot()


def get_env(key: str, default: str = "") -> str:
    """Return the raw string value for ``key``, or ``default``.

    Kept for callers that read arbitrary keys rather than snapshot fields.
    """
    return EnvResolver().get_string(key, default)
