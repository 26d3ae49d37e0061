# Copyright (c) Syntropy Systems
"""sift init command."""

from pathlib import Path

import typer
from rich.console import Console

from sift.config import CONFIG_DIR_NAME, write_default_config

console = Console()


def init(
    path: Path = typer.Argument(
        Path(),
        help="Directory to initialize (default: current directory)",
    ),
) -> None:
    """Initialize a sift project.

    Creates a .sift directory holding config.yaml with the default
    display and export settings.
    """
    target = path.resolve()
    sift_dir = target / CONFIG_DIR_NAME

    if sift_dir.exists():
        console.print(f"[yellow]Already initialized:[/yellow] {sift_dir}")
        return

    config_path = write_default_config(sift_dir)

    console.print(f"[green]Initialized sift project:[/green] {sift_dir}")
    console.print(f"  [dim]config:[/dim] {config_path}")
