from dataclasses import dataclass

from .domain.snapshot import SettingsSnapshot
from .infrastructure.logging import setup_logging
from .resolution.builder import build_snapshot
from .resolution.resolver import EnvResolver


@dataclass(frozen=True)
class App:
    """Application wiring container.

    Holds the resolved SettingsSnapshot so consumers receive it by
    reference from startup instead of reaching for a global.
    """

    snapshot: SettingsSnapshot


def create_app(
    snapshot: SettingsSnapshot | None = None,
    resolver: EnvResolver | None = None,
) -> App:
    """Create an `App` from a given snapshot or one resolved now.

    Logging is configured from the snapshot before returning.
    """
    snapshot = snapshot or build_snapshot(resolver)
    setup_logging(snapshot)
    return App(snapshot=snapshot)
