"""Base interface for environment lookup providers."""

from abc import ABC, abstractmethod


class BaseEnvProvider(ABC):
    """Abstract source of environment values, queried in priority order."""

    name: str = "base"

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the raw value for ``key``, or None when absent.

        Implementations may raise when their source is unreachable; the
        resolver treats any exception as "absent".
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
