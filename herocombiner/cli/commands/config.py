"""config command: show and edit persistent settings."""

import typer

from ..app import app, console
from ...config import get_config, get_config_path, reset_config, set_config_value
from ...core.exceptions import ConfigError


@app.command("config")
def config_command(
    action: str = typer.Argument(..., help="show | set | reset"),
    key: str | None = typer.Argument(None, help="Dotted key, e.g. combine.max_size"),
    value: str | None = typer.Argument(None, help="New value"),
):
    """Show or change herocombiner settings."""
    if action == "show":
        try:
            config = get_config()
        except ConfigError as e:
            console.print(f"[red]✗[/red] {e}")
            raise typer.Exit(1)

        console.print(f"[dim]{get_config_path()}[/dim]")
        for section_name, section in config:
            console.print(f"[bold]{section_name.capitalize()}[/bold]")
            for field_name, field_value in section:
                console.print(f"  {field_name} = {field_value}")
        return

    if action == "set":
        if key is None or value is None:
            console.print("[red]✗[/red] Usage: herocombiner config set <key> <value>")
            raise typer.Exit(1)
        try:
            set_config_value(key, value)
        except ConfigError as e:
            console.print(f"[red]✗[/red] {e}")
            raise typer.Exit(1)
        console.print(f"[green]✓[/green] {key} = {value}")
        return

    if action == "reset":
        path = reset_config()
        console.print(f"[green]✓[/green] Config reset ({path})")
        return

    console.print(f"[red]✗[/red] Unknown action: {action}. Use show, set or reset.")
    raise typer.Exit(1)
