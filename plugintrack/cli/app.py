"""Main Typer application — imports and registers all CLI commands.

Entry point: ``plugintrack`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer

from plugintrack.cli.commands.actions import actions_cmd
from plugintrack.cli.commands.classify import classify_cmd
from plugintrack.config import config

app = typer.Typer(
    name="plugintrack",
    help="plugintrack: track installed plugin versions and pending actions.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


def resolve_log_level(verbose: bool) -> int | str:
    """DEBUG when asked for on the command line or via PLUGINTRACK_DEBUG."""
    if verbose or config.debug:
        return logging.DEBUG
    return config.log_level


@app.callback()
def setup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=resolve_log_level(verbose),
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
app.command(name="actions", help="Show the legal actions for each status.")(actions_cmd)
app.command(name="classify", help="Classify a local file against known versions.")(classify_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
