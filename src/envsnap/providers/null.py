"""Null Object implementation for lookup providers."""

from .base import BaseEnvProvider


class NullEnvProvider(BaseEnvProvider):
    """Provider with no values, used to disable a lookup slot."""

    name = "null"

    def get(self, key: str) -> str | None:
        return None
