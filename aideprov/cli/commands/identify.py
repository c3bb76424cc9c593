"""``aideprov content|tree|model-package``: compute identifiers on disk."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from aideprov.config import config
from aideprov.core.errors import IdentifierError

console = Console()


def _abort(message: str) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    raise typer.Exit(code=1)


def content_cmd(
    file: Path = typer.Argument(..., help="File whose bytes are addressed."),
) -> None:
    """Print the content identifier (swh:1:cnt) of a file."""
    addresser = config.build_content_addresser()
    try:
        identifier = addresser.address_file(file)
    except (IdentifierError, OSError) as exc:
        _abort(str(exc))
    console.print(str(identifier), soft_wrap=True, markup=False, highlight=False)


def tree_cmd(
    directory: Path = typer.Argument(..., help="Directory to address."),
    exclude: list[str] = typer.Option(
        None,
        "--exclude",
        "-x",
        help="Entry name pattern to skip (repeatable). Replaces the defaults.",
    ),
    workers: int = typer.Option(
        None, "--workers", "-w", min=1, help="Threads used to hash files."
    ),
    skip_errors: bool = typer.Option(
        False,
        "--skip-errors",
        help="Leave unreadable entries out instead of failing.",
    ),
) -> None:
    """Print the directory identifier (swh:1:dir) of a directory tree."""
    overrides: dict = {}
    if exclude:
        overrides["excludes"] = exclude
    if workers:
        overrides["max_workers"] = workers
    if skip_errors:
        overrides["on_error"] = "skip"
    walker = config.build_walker(**overrides)

    try:
        result = walker.address_directory(directory)
    except (IdentifierError, OSError) as exc:
        _abort(str(exc))

    console.print(str(result.identifier), soft_wrap=True, markup=False, highlight=False)

    if result.failures:
        table = Table(title="Skipped entries")
        table.add_column("Path", style="yellow")
        table.add_column("Error")
        for failure in result.failures:
            table.add_row(escape(failure.path), escape(failure.error))
        console.print(table)


def model_package_cmd(
    directory: Path = typer.Argument(..., help="Model repository directory."),
) -> None:
    """Identify a model repository and its well-known component files."""
    walker = config.build_walker()
    try:
        package = walker.describe_model_package(directory)
    except (IdentifierError, OSError) as exc:
        _abort(str(exc))

    console.print(
        f"package {package.package}", soft_wrap=True, markup=False, highlight=False
    )

    if not package.components:
        console.print("[dim]No known model files found.[/dim]")
        return

    table = Table(title="Model components")
    table.add_column("File", style="cyan")
    table.add_column("Format")
    table.add_column("Size", justify="right")
    table.add_column("SWHID", overflow="fold")
    for filename, info in package.components.items():
        table.add_row(filename, info.model_format, str(info.size_bytes), str(info.swhid))
    console.print(table)

    for filename in package.skipped:
        console.print(f"[yellow]Skipped:[/yellow] {filename}")
