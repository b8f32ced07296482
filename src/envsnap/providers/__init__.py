"""Lookup providers - prioritised sources of raw environment values."""

from .base import BaseEnvProvider
from .dotenv_file import DotenvProvider
from .mapping import MappingProvider
from .null import NullEnvProvider
from .process import ProcessEnvProvider

__all__ = [
    "BaseEnvProvider",
    "DotenvProvider",
    "MappingProvider",
    "NullEnvProvider",
    "ProcessEnvProvider",
    "default_providers",
]


def default_providers() -> list[BaseEnvProvider]:
    """Process environment first, then the working directory's ``.env``."""
    return [ProcessEnvProvider(), DotenvProvider()]
