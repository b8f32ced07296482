"""In-memory provider backed by a fixed mapping."""

import typing as t
from types import MappingProxyType

from .base import BaseEnvProvider


class MappingProvider(BaseEnvProvider):
    """Serves values from a mapping captured at construction time."""

    def __init__(self, values: t.Mapping[str, str], name: str = "mapping") -> None:
        self._values = MappingProxyType(dict(values))
        self.name = name

    def get(self, key: str) -> str | None:
        return self._values.get(key)
