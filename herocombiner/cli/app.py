"""Typer application for herocombiner."""

import logging

import typer
from rich.console import Console

from .. import __version__
from ..config import get_config
from ..core.exceptions import ConfigError


app = typer.Typer(
    name="herocombiner",
    help="Generate every combination of a set of hero descriptor files.",
    no_args_is_help=True,
)

console = Console()


def setup_logging(level: str) -> None:
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("herocombiner").setLevel(numeric_level)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"herocombiner {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log progress at INFO level"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    try:
        level = get_config().logging.level
    except ConfigError:
        # Commands that need the config report the problem themselves
        level = "WARNING"
    setup_logging("INFO" if verbose else level)
    ctx.obj = {"verbose": verbose}


# Register commands
from .commands import combine, inspect, config  # noqa: E402,F401
