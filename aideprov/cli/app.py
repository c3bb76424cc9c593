"""Main Typer application: imports and registers all CLI commands.

Entry point: ``aideprov`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from aideprov.cli.commands.identify import content_cmd, model_package_cmd, tree_cmd
from aideprov.cli.commands.inspect_cmd import parse_cmd, qualify_cmd
from aideprov.cli.commands.lineage_cmd import lineage_cmd
from aideprov.config import config

app = typer.Typer(
    name="aideprov",
    help="aideprov: content-derived SWHID identifiers for AI model provenance.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        None, "--log-level", help="Logging level (defaults to AIDEPROV_LOG_LEVEL)."
    ),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


# Register subcommands
app.command(name="content", help="Content identifier of a file.")(content_cmd)
app.command(name="tree", help="Directory identifier of a directory tree.")(tree_cmd)
app.command(name="model-package", help="Identify a model repository.")(model_package_cmd)
app.command(name="parse", help="Validate and explain an identifier.")(parse_cmd)
app.command(name="qualify", help="Append qualifiers to an identifier.")(qualify_cmd)
app.command(name="lineage", help="Model lineage record as JSON.")(lineage_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
