"""Settings inspection commands."""

import typer

from ...domain.exceptions import UnknownSettingError
from ..output.format import format_line, format_value
from ..state import CLIState


def show(
    ctx: typer.Context,
    reveal: bool = typer.Option(
        False,
        "--reveal",
        help="Print secret values instead of masking them",
    ),
) -> None:
    """Print every resolved setting as KEY=value."""
    state: CLIState = ctx.obj
    for key, value in state.snapshot.flatten().items():
        typer.echo(format_line(key, value, reveal=reveal))


def get(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Environment variable name"),
    default: str = typer.Option("", "--default", "-d", help="Value when unset"),
) -> None:
    """Print the raw value of any variable, or the default."""
    state: CLIState = ctx.obj
    typer.echo(state.resolver.get_string(key, default))


def field(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Snapshot key, e.g. CORS_ORIGINS"),
) -> None:
    """Print a single resolved snapshot value."""
    state: CLIState = ctx.obj
    try:
        value = state.snapshot.value_for(key)
    except UnknownSettingError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.echo(format_value(value))
