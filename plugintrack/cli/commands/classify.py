"""``plugintrack classify PATH`` — classify a local file against known versions.

Checksums the file, records it as a local observation against the lineage
given on the command line, and prints the resulting status and action.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from plugintrack.config import config
from plugintrack.core.artifact import Artifact
from plugintrack.core.filesystem import LocalFilesystem
from plugintrack.models.status import ActionTable, Status

console = Console()


def parse_version(value: str) -> tuple[str, int]:
    """Parse ``CHECKSUM:TIMESTAMP`` into its parts."""
    checksum, sep, timestamp = value.rpartition(":")
    if not sep or not checksum:
        raise typer.BadParameter(f"Expected CHECKSUM:TIMESTAMP, got {value!r}")
    try:
        return checksum, int(timestamp)
    except ValueError:
        raise typer.BadParameter(
            f"Timestamp must be an integer, got {timestamp!r}"
        ) from None


def classify_cmd(
    path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="The local file to classify.",
    ),
    current: str | None = typer.Option(
        None,
        "--current",
        "-c",
        help="Current version as CHECKSUM:TIMESTAMP.",
    ),
    previous: list[str] = typer.Option(
        [],
        "--previous",
        "-p",
        help="A previous version as CHECKSUM:TIMESTAMP (repeatable).",
    ),
) -> None:
    """Classify a local file as up to date, updateable, or modified."""
    filesystem = LocalFilesystem(path.parent, config.update_dir)
    checksum, timestamp = parse_version(current) if current else (None, 0)

    artifact = Artifact(
        path.name,
        checksum,
        timestamp,
        Status.INSTALLED if checksum else Status.NOT_INSTALLED,
        actions=ActionTable.from_config(config),
        filesystem=filesystem,
    )
    for value in previous:
        artifact.add_previous_version(*parse_version(value))

    local_checksum = filesystem.checksum(path.name)
    local_timestamp = filesystem.logical_timestamp(path.name)
    artifact.record_local_observation(local_checksum, local_timestamp)

    lines = [
        f"[bold]File:[/bold]      {artifact.filename}",
        f"[bold]Checksum:[/bold]  {local_checksum}",
        f"[bold]Timestamp:[/bold] {local_timestamp}",
        f"[bold]Status:[/bold]    {artifact.status.value}",
        f"[bold]Action:[/bold]    {artifact.action.label}",
    ]
    if artifact.pending_checksum is not None:
        lines.append(
            f"[bold]Pending:[/bold]   {artifact.pending_checksum}:{artifact.pending_timestamp}"
        )
    console.print(
        Panel(
            "\n".join(lines),
            title="[bold]plugintrack[/bold]",
            border_style="green" if artifact.status == Status.INSTALLED else "yellow",
            padding=(1, 2),
        )
    )
