# Copyright (c) Syntropy Systems
"""Export command - flatten responses to XLSX/CSV/JSON."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from sift.cli.common import console, read_records
from sift.config import load_config
from sift.export import EXPORT_SUFFIXES, export_rows


def export(
    path: Path = typer.Argument(..., help="Response file (.json or .jsonl)"),
    output: Optional[Path] = typer.Argument(
        None,
        help="Output file path (.xlsx, .csv or .json)",
    ),
) -> None:
    """Export responses as a table with one row per response.

    Examples:
        sift export responses.json
        sift export responses.jsonl table.csv

    """
    config = load_config()
    target = output or Path(config.export_filename)

    if target.suffix.lower() not in EXPORT_SUFFIXES:
        console.print("[red]Output must be .xlsx, .csv or .json[/red]")
        raise typer.Exit(1)

    records = read_records(path)
    written = export_rows(records, target, sheet_name=config.sheet_name)
    if written is None:
        console.print(
            "[yellow]Warning: No responses to export[/yellow]"
        )
        return

    rows = sum(len(r.responses) for r in records)
    console.print(f"[green]Exported {rows} response(s) to {written}[/green]")
