"""Custom exceptions for envsnap."""


class EnvSnapError(Exception):
    """Base exception for envsnap errors."""

    pass


class ProviderUnavailableError(EnvSnapError):
    """Raised when a lookup provider cannot reach its source.

    The resolver treats this (and any other provider fault) as "value
    absent", so it never reaches callers of the accessors.
    """

    def __init__(self, *, provider: str, reason: str) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__(f"Provider '{provider}' unavailable: {reason}")


class UnknownSettingError(EnvSnapError):
    """Raised when a key is not part of the settings snapshot."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown setting: {key}")
