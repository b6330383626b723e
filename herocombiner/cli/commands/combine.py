"""combine command: build the combinations archive."""

from pathlib import Path

import typer

from ..app import app, console
from ...config import get_config
from ...core.exceptions import HeroCombinerError
from ...core.models import PipelineStatus
from ...pipeline import CombinationPipeline


def _report_status(status: PipelineStatus) -> None:
    if status == PipelineStatus.RUNNING:
        console.print("[dim]Combining...[/dim]")
    elif status == PipelineStatus.FAILED:
        console.print("[red]Combination run failed[/red]")


@app.command("combine")
def combine_command(
    files: list[Path] = typer.Argument(..., help="Hero descriptor files (at least two)"),
    max_size: int | None = typer.Option(
        None, "--max-size", "-k", help="Largest group size (default: combine.max_size)"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Archive path (default: <output_dir>/<archive name>)"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="List generated file names without writing an archive"
    ),
):
    """Generate every combination of FILES and pack them into a zip archive."""
    try:
        config = get_config()
    except HeroCombinerError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)

    size = max_size if max_size is not None else config.combine.max_size
    archive_path = None if dry_run else (output or config.archive_path)

    pipeline = CombinationPipeline(
        compression=config.archive.compression,
        on_status=_report_status,
    )

    try:
        result = pipeline.run(list(files), size, archive_path)
    except (HeroCombinerError, OSError) as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)

    if dry_run:
        for name in result.file_names:
            console.print(name)
        console.print(
            f"[green]✓[/green] {result.combination_count} combinations "
            f"from {result.hero_count} heroes (dry run)"
        )
        return

    console.print(
        f"[green]✓[/green] {result.combination_count} combinations "
        f"from {result.hero_count} heroes written to {result.archive_path}"
    )
