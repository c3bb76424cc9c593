"""aideprov CLI: Typer-based command-line interface.

Provides the ``aideprov`` command with subcommands for computing content
and directory identifiers, inspecting and qualifying identifiers, and
emitting model lineage records.

All output uses Rich for formatted terminal display.
"""
