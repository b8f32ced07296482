"""Typed environment lookups over a prioritised provider chain."""

import re
import typing as t

from ..domain.mode import RuntimeMode
from ..infrastructure.logging import get_logger
from ..providers import BaseEnvProvider, default_providers

MODE_KEYS: t.Final = ("NODE_ENV", "APP_ENV", "MODE")

# Leading base-10 integer, as read by a lenient integer parse: "12px" -> 12.
_LEADING_INT: t.Final = re.compile(r"\s*([+-]?[0-9]+)")


class EnvResolver:
    """Resolves raw values from providers and coerces them to scalar types.

    Providers are tried in order and the first non-empty value wins. A
    provider that raises is treated as not having the key, so none of the
    accessors ever raise because of the environment.

    Usage:
        resolver = EnvResolver()
        port = resolver.get_number("PORT", 3000)

    Or with explicit providers:
        resolver = EnvResolver([MappingProvider({"PORT": "8080"})])
    """

    def __init__(self, providers: t.Sequence[BaseEnvProvider] | None = None) -> None:
        self.providers: tuple[BaseEnvProvider, ...] = tuple(
            default_providers() if providers is None else providers
        )

    def lookup(self, key: str) -> str | None:
        """Return the first non-empty value for ``key`` across providers."""
        for provider in self.providers:
            value = self._probe(provider, key)
            if value:
                return value
        return None

    @staticmethod
    def _probe(provider: BaseEnvProvider, key: str) -> str | None:
        try:
            value = provider.get(key)
        except Exception:
            return None
        return value if isinstance(value, str) else None

    def get_string(self, key: str, default: str = "") -> str:
        value = self.lookup(key)
        return value if value else default

    def get_number(self, key: str, default: int) -> int:
        """Parse the leading base-10 integer of the value.

        Empty or non-numeric values return ``default``, as do digit runs
        too long to convert. Sign and range are not checked.
        """
        value = self.get_string(key)
        if not value:
            return default
        match = _LEADING_INT.match(value)
        if match is None:
            return default
        try:
            return int(match.group(1))
        except ValueError:
            return default

    def get_boolean(self, key: str, default: bool) -> bool:
        """True only for a case-insensitive ``"true"``; empty returns default."""
        value = self.get_string(key)
        if not value:
            return default
        return value.lower() == "true"

    def get_array(
        self, key: str, default: t.Sequence[str] = ()
    ) -> list[str] | t.Sequence[str]:
        """Split a comma-separated value and strip each element.

        Empty segments are kept, so ``"a,,b"`` gives ``["a", "", "b"]``.
        """
        value = self.get_string(key)
        if not value:
            return default
        return [item.strip() for item in value.split(",")]

    def resolve_mode(self) -> RuntimeMode:
        """Determine the runtime mode from the first mode key present."""
        for key in MODE_KEYS:
            raw = self.lookup(key)
            if not raw:
                continue
            if not RuntimeMode.is_known(raw):
                get_logger(__name__).warning(
                    f"Unrecognised runtime mode {raw!r} in {key}, "
                    f"using {RuntimeMode.DEVELOPMENT.value}"
                )
            return RuntimeMode.parse(raw)
        return RuntimeMode.DEVELOPMENT
