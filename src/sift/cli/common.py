# Copyright (c) Syntropy Systems
"""Helpers shared by sift commands."""
from __future__ import annotations

from typing import TYPE_CHECKING

import typer
from rich.console import Console

from sift.loader import load_records

if TYPE_CHECKING:
    from pathlib import Path

    from sift.models.response import ResponseRecord

console = Console()


def read_records(path: Path) -> list[ResponseRecord]:
    """Load records for a command, exiting with an error message on failure."""
    try:
        return load_records(path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
