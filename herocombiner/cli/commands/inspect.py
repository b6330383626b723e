"""inspect command: show what the parser extracts from descriptor files."""

from pathlib import Path

import typer
import yaml

from ..app import app, console
from ...parser import parse_file


@app.command("inspect")
def inspect_command(
    files: list[Path] = typer.Argument(..., help="Hero descriptor files"),
):
    """Print the fields extracted from each FILE as YAML.

    Fields the parser couldn't find are shown as null.
    """
    failed = False
    for path in files:
        try:
            hero = parse_file(path)
        except OSError as e:
            console.print(f"[red]✗[/red] {path}: {e}")
            failed = True
            continue

        console.print(f"[bold]{path}[/bold]")
        fields = hero.model_dump(exclude={"source"})
        console.print(yaml.safe_dump(fields, sort_keys=False, allow_unicode=True), markup=False)

    if failed:
        raise typer.Exit(1)
