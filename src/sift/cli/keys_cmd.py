# Copyright (c) Syntropy Systems
"""sift keys command."""

from pathlib import Path

import typer
from rich.table import Table

from sift.cli.common import console, read_records
from sift.keys import MODEL, default_keys, format_group_key, selectable_keys


def keys(
    path: Path = typer.Argument(..., help="Response file (.json or .jsonl)"),
) -> None:
    """List the keys responses can be grouped by.

    Variables appear in the order they are first found, followed by the
    model key. The default grouping is marked.
    """
    records = read_records(path)
    if not records:
        console.print("[dim]No responses found[/dim]")
        return

    default = default_keys(records)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Key")
    table.add_column("Kind", style="dim")
    table.add_column("Values", justify="right")
    table.add_column("Default")

    for key in selectable_keys(records):
        if key is MODEL:
            kind = "model"
            values = {r.model_id for r in records}
        else:
            kind = "variable"
            values = {r.variables[key] for r in records if key in r.variables}
        table.add_row(
            format_group_key(key),
            kind,
            str(len(values)),
            "[green]*[/green]" if key in default else "",
        )

    console.print(table)
