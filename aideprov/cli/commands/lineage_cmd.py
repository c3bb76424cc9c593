"""``aideprov lineage``: emit a model lineage record as JSON."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from aideprov.config import config
from aideprov.core.errors import IdentifierError
from aideprov.core.lineage import LineageRecorder

console = Console()


def lineage_cmd(
    derived: str = typer.Argument(..., help="Identifier of the derived model."),
    base_model: str = typer.Argument(..., help="Identifier of the base model."),
    training_code: str = typer.Argument(..., help="Identifier of the training code."),
) -> None:
    """Print the lineage record linking a model to its base and training code."""
    recorder = LineageRecorder(config.build_codec())
    try:
        lineage = recorder.model_lineage(derived, base_model, training_code)
    except IdentifierError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    console.print(
        lineage.model_dump_json(indent=2), soft_wrap=True, markup=False, highlight=False
    )
