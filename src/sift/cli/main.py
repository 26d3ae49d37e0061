# Copyright (c) Syntropy Systems
"""Main CLI entry point for sift."""

import logging

import typer

from sift.cli.export import export
from sift.cli.init_cmd import init
from sift.cli.inspect_cmd import inspect
from sift.cli.keys_cmd import keys

app = typer.Typer(
    name="sift",
    help="Group model responses by model and prompt variables, and export them.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Group model responses by model and prompt variables, and export them."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# Register commands
_ = app.command()(init)
_ = app.command()(keys)
_ = app.command()(inspect)
_ = app.command(name="export")(export)


if __name__ == "__main__":
    app()
