"""Command-line inspection of resolved settings.

Exposes ``create_cli_app`` for embedding and tests, and ``cli`` as the
target of the ``envsnap`` console script.
"""

from .app import create_cli_app

__all__ = ["create_cli_app", "cli"]


def cli() -> None:
    """Resolve settings from the environment and run the envsnap CLI."""
    create_cli_app()()
