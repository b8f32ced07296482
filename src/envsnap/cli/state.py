"""CLI state container."""

from functools import cached_property

from ..domain.snapshot import SettingsSnapshot
from ..resolution.builder import build_snapshot
from ..resolution.resolver import EnvResolver


class CLIState:
    """Shared state for CLI commands.

    The snapshot is resolved lazily so commands that only read raw keys
    never build one.
    """

    def __init__(self, resolver: EnvResolver):
        self.resolver = resolver

    @cached_property
    def snapshot(self) -> SettingsSnapshot:
        return build_snapshot(self.resolver)
