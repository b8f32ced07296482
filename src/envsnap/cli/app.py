"""CLI application factory."""

from pathlib import Path

import typer

from ..providers import DotenvProvider, ProcessEnvProvider
from ..resolution.resolver import EnvResolver
from .commands.inspect import field, get, show
from .state import CLIState


def create_cli_app(state: CLIState | None = None) -> typer.Typer:
    """Create CLI application with optional state override.

    Args:
        state: Optional CLIState override for testing

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="envsnap",
        help="Inspect settings resolved from environment variables",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        env_file: Path = typer.Option(
            Path(".env"),
            "--env-file",
            "-e",
            help="Dotenv file consulted after the process environment",
        ),
    ) -> None:
        """Global options available to all commands."""
        if state is not None:
            ctx.obj = state
            return
        resolver = EnvResolver([ProcessEnvProvider(), DotenvProvider(env_file)])
        ctx.obj = CLIState(resolver)

    app.command()(show)
    app.command()(get)
    app.command()(field)

    return app
