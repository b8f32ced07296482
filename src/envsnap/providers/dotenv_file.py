"""Provider reading a ``.env`` descriptor file via python-dotenv."""

import typing as t
from pathlib import Path

from dotenv import dotenv_values

from ..domain.exceptions import ProviderUnavailableError
from .base import BaseEnvProvider


class DotenvProvider(BaseEnvProvider):
    """Reads variables declared in a dotenv file.

    The file is parsed on first lookup and cached for the lifetime of the
    provider. A missing file simply has no values. A file that exists but
    cannot be read raises ProviderUnavailableError on every lookup.
    """

    name = "dotenv"

    def __init__(self, path: Path | str = ".env", encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding
        self._values: dict[str, str | None] | None = None

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def _load(self) -> t.Mapping[str, str | None]:
        if self._values is not None:
            return self._values
        if not self.path.exists():
            self._values = {}
            return self._values
        try:
            self._values = dict(dotenv_values(self.path, encoding=self.encoding))
        except (OSError, UnicodeDecodeError) as e:
            raise ProviderUnavailableError(provider=self.name, reason=str(e)) from e
        return self._values
