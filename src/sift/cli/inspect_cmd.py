# Copyright (c) Syntropy Systems
"""sift inspect command."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from sift.cli.common import console, read_records
from sift.colors import ColorStore
from sift.config import load_config
from sift.inspector import ResponseInspector
from sift.keys import format_group_key, parse_group_key
from sift.render import render_tree


def inspect(
    path: Path = typer.Argument(..., help="Response file (.json or .jsonl)"),
    by: Optional[list[str]] = typer.Option(
        None,
        "--by", "-b",
        help="Group by this key; repeat to nest (@model for the model, var:NAME to force a variable)",
    ),
    flat: bool = typer.Option(
        False,
        "--flat",
        help="Show all responses in one group",
    ),
) -> None:
    """Show responses grouped by model and prompt variables.

    Examples:
        sift inspect responses.json
        sift inspect responses.json --by @model --by topic

    """
    config = load_config()
    records = read_records(path)
    if not records:
        console.print("[dim]No responses found[/dim]")
        return

    inspector = ResponseInspector(records)
    if flat:
        inspector.set_keys([])
    elif by:
        inspector.set_keys([parse_group_key(token) for token in by])

    selected = ", ".join(format_group_key(k) for k in inspector.keys) or "-"
    console.print(
        f"[bold]{len(records)} record(s)[/bold] [dim]grouped by[/dim] {selected}"
    )

    tree = render_tree(
        inspector.tree,
        ColorStore(config.model_palette),
        title=path.name,
        header_max_len=config.header_max_len,
        tag_max_len=config.tag_max_len,
    )
    console.print(tree)
