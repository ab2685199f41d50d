"""Backup commands for pokerlog CLI.

Exports the full session collection to a JSON file and restores it.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Optional

import click
from rich.panel import Panel

from pokerlog.cli.common import console, fail, get_store
from pokerlog.db.backup import InvalidBackupError, backup_filename, export_backup, import_backup


@click.command()
@click.argument("path", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def export(ctx: click.Context, path: Optional[Path]) -> None:
    """Export all sessions to a JSON backup.

    PATH defaults to poker-tracker-backup-YYYY-MM-DD.json in the
    current directory.

    \b
    Examples:
      pokerlog export
      pokerlog export ~/backups/poker.json
    """
    path = path or Path(backup_filename(date.today()))
    data = export_backup(get_store(ctx), datetime.now())

    try:
        path.write_bytes(data)
    except OSError as e:
        fail("Failed to write backup:", str(e))

    console.print(f"[green]✓ Backup written to {path}[/green]")


@click.command("import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def import_(ctx: click.Context, path: Path) -> None:
    """Replace ALL sessions with the contents of a backup.

    \b
    Examples:
      pokerlog import poker-tracker-backup-2024-12-31.json
    """
    try:
        count = import_backup(get_store(ctx), path.read_bytes())
    except InvalidBackupError as e:
        fail(str(e), e.detail)

    console.print(Panel(
        f"Imported [bold]{count}[/bold] sessions from {path.name}",
        title="[bold cyan]Import Complete[/bold cyan]",
        border_style="cyan",
    ))
