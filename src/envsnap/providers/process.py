"""Process environment provider."""

import os
import typing as t

from .base import BaseEnvProvider


class ProcessEnvProvider(BaseEnvProvider):
    """Reads variables from the process environment.

    ``os.environ`` is consulted at lookup time, so the provider sees the
    environment as it is when the snapshot is built. Pass ``environ`` to
    read from a fixed mapping instead.
    """

    name = "process"

    def __init__(self, environ: t.Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def get(self, key: str) -> str | None:
        environ = self._environ if self._environ is not None else os.environ
        return environ.get(key)
