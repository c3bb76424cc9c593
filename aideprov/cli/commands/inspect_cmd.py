"""``aideprov parse|qualify``: inspect and annotate identifier strings."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from aideprov.config import config
from aideprov.core.errors import IdentifierError, ParseError

console = Console()


def parse_cmd(
    swhid: str = typer.Argument(..., help="Identifier string to parse."),
) -> None:
    """Validate an identifier and show its fields."""
    codec = config.build_codec()
    try:
        identifier = codec.parse(swhid)
    except ParseError as exc:
        console.print(f"[bold red]Invalid:[/bold red] {escape(exc.reason)}")
        raise typer.Exit(code=1)

    table = Table(title="Identifier", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value", overflow="fold")
    table.add_row("namespace", identifier.namespace)
    table.add_row("version", str(identifier.schema_version))
    table.add_row("type", f"{identifier.object_type.value} ({identifier.object_type.name.lower()})")
    table.add_row("digest", identifier.digest)
    for key, value in identifier.qualifiers.items():
        table.add_row(f"qualifier:{key}", escape(value))
    console.print(table)


def qualify_cmd(
    swhid: str = typer.Argument(..., help="Identifier to annotate."),
    qualifier: list[str] = typer.Option(
        None,
        "--qualifier",
        "-q",
        help="key=value pair (repeatable, order is kept).",
    ),
) -> None:
    """Append qualifiers to an identifier."""
    codec = config.build_codec()
    pairs: dict[str, str] = {}
    for item in qualifier or []:
        key, sep, value = item.partition("=")
        if not sep:
            console.print(
                f"[bold red]Error:[/bold red] expected key=value, got {escape(repr(item))}"
            )
            raise typer.Exit(code=1)
        if key in pairs:
            console.print(
                f"[bold red]Error:[/bold red] duplicate qualifier key {escape(repr(key))}"
            )
            raise typer.Exit(code=1)
        pairs[key] = value

    try:
        identifier = codec.parse(swhid)
        qualified = codec.qualifier_codec.attach(identifier, pairs)
    except IdentifierError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    console.print(qualified, soft_wrap=True, markup=False, highlight=False)
