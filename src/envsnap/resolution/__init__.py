"""Settings resolution - typed lookups and snapshot assembly."""

from .access import get_env, get_snapshot
from .builder import build_snapshot
from .resolver import MODE_KEYS, EnvResolver

__all__ = [
    "EnvResolver",
    "MODE_KEYS",
    "build_snapshot",
    "get_env",
    "get_snapshot",
]
