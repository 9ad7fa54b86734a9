"""``plugintrack actions`` — show which actions each status allows."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from plugintrack.config import config
from plugintrack.models.status import ActionTable, Status

console = Console()


def actions_cmd(
    developer: bool = typer.Option(
        False,
        "--developer",
        "-d",
        help="Include developer actions even if PLUGINTRACK_DEVELOPER_MODE is off.",
    ),
) -> None:
    """Render the status/action table. The first action is the default."""
    table_source = (
        ActionTable(developer_mode=True) if developer
        else ActionTable.from_config(config)
    )

    table = Table(
        title="Legal actions"
        + (" (developer mode)" if table_source.developer_mode else "")
    )
    table.add_column("Status", style="cyan", no_wrap=True)
    table.add_column("Default", style="green")
    table.add_column("Other actions")

    for status in Status:
        default, *others = table_source.actions_for(status)
        table.add_row(
            status.value,
            default.label,
            ", ".join(action.label for action in others) or "[dim]-[/dim]",
        )

    console.print(table)
