"""Session commands for pokerlog CLI.

Handles adding, editing, deleting, clearing and listing sessions.
"""

from datetime import date, datetime
from typing import Optional

import click
from pydantic import ValidationError
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from pokerlog.analytics import filter_year_to_date
from pokerlog.cli.common import (
    console,
    currency,
    fail,
    format_money,
    get_store,
    money_markup,
)
from pokerlog.models import Session, SessionDraft

DATE_TYPE = click.DateTime(formats=["%Y-%m-%d"])


def _session_panel(session: Session, title: str, symbol: str) -> Panel:
    hours = f"{session.hours:.2f}h" if session.hours else "—"
    text = (
        f"[bold]{session.date}[/bold]  {escape(session.type)} {escape(session.location)}\n"
        f"[dim]{escape(session.stakes or '-')} • {hours}[/dim]\n\n"
        f"Buy-in:   {format_money(session.buyin, symbol)}\n"
        f"Cash-out: {format_money(session.cashout, symbol)}\n"
        f"Result:   {money_markup(session.profit, symbol)}\n\n"
        f"[dim]ID: {escape(session.id)}[/dim]"
    )
    return Panel(text, title=f"[bold cyan]{title}[/bold cyan]", border_style="cyan")


@click.command()
@click.option("--date", "session_date", type=DATE_TYPE, default=None,
              help="Session date (YYYY-MM-DD). Defaults to today.")
@click.option("--type", "game_type", default="Cash", show_default=True,
              help="Game type (e.g., Cash, Tournament).")
@click.option("--location", default="", help="Where you played.")
@click.option("--stakes", default="", help="Stakes (e.g., 1/2 NLH).")
@click.option("--hours", type=float, default=0.0, help="Hours played.")
@click.option("--buyin", type=float, default=0.0, help="Total buy-in.")
@click.option("--cashout", type=float, default=0.0, help="Total cash-out.")
@click.option("--notes", default="", help="Notes about the session.")
@click.pass_context
def add(
    ctx: click.Context,
    session_date: Optional[datetime],
    game_type: str,
    location: str,
    stakes: str,
    hours: float,
    buyin: float,
    cashout: float,
    notes: str,
) -> None:
    """Record a new session.

    The result (cash-out minus buy-in) is stored with the session.

    \b
    Examples:
      pokerlog add --buyin 100 --cashout 250 --hours 3
      pokerlog add --date 2024-03-02 --type Tournament --buyin 55 --cashout 0
    """
    try:
        draft = SessionDraft(
            date=session_date.date() if session_date else date.today(),
            type=game_type,
            location=location,
            stakes=stakes,
            hours=hours,
            buyin=buyin,
            cashout=cashout,
            notes=notes,
        )
    except ValidationError as e:
        fail("Invalid session:", str(e))

    session = get_store(ctx).add(draft)
    console.print(_session_panel(session, "Session Added", currency(ctx)))


@click.command()
@click.argument("session_id")
@click.option("--date", "session_date", type=DATE_TYPE, default=None, help="New date (YYYY-MM-DD).")
@click.option("--type", "game_type", default=None, help="New game type.")
@click.option("--location", default=None, help="New location.")
@click.option("--stakes", default=None, help="New stakes.")
@click.option("--hours", type=float, default=None, help="New hours played.")
@click.option("--buyin", type=float, default=None, help="New buy-in.")
@click.option("--cashout", type=float, default=None, help="New cash-out.")
@click.option("--notes", default=None, help="New notes.")
@click.pass_context
def edit(
    ctx: click.Context,
    session_id: str,
    session_date: Optional[datetime],
    game_type: Optional[str],
    location: Optional[str],
    stakes: Optional[str],
    hours: Optional[float],
    buyin: Optional[float],
    cashout: Optional[float],
    notes: Optional[str],
) -> None:
    """Edit a stored session.

    SESSION_ID is the ID shown by 'pokerlog list'. Only the given
    fields change; the result is recomputed.

    \b
    Examples:
      pokerlog edit 3f2c... --cashout 300
    """
    changes = {
        "date": session_date.date() if session_date else None,
        "type": game_type,
        "location": location.strip() if location is not None else None,
        "stakes": stakes.strip() if stakes is not None else None,
        "hours": hours,
        "buyin": buyin,
        "cashout": cashout,
        "notes": notes.strip() if notes is not None else None,
    }
    changes = {k: v for k, v in changes.items() if v is not None}

    try:
        session = get_store(ctx).update(session_id, **changes)
    except KeyError:
        fail(f"No session with ID {session_id}")
    except ValidationError as e:
        fail("Invalid session:", str(e))

    console.print(_session_panel(session, "Session Updated", currency(ctx)))


@click.command()
@click.argument("session_id")
@click.pass_context
def delete(ctx: click.Context, session_id: str) -> None:
    """Delete a session.

    SESSION_ID is the ID shown by 'pokerlog list'.
    """
    if get_store(ctx).delete(session_id):
        console.print(f"[green]✓ Deleted session {session_id}[/green]")
    else:
        console.print(f"[yellow]No session with ID {session_id}[/yellow]")


@click.command()
@click.option("--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
@click.pass_context
def clear(ctx: click.Context, yes: bool) -> None:
    """Delete ALL sessions."""
    if not yes and not click.confirm("Clear ALL sessions? This cannot be undone."):
        console.print("[dim]Nothing changed[/dim]")
        return

    get_store(ctx).clear()
    console.print("[green]✓ All sessions cleared[/green]")


@click.command("list")
@click.option("--year", type=click.IntRange(1, 9999), default=None, help="Year to show (default: current year).")
@click.pass_context
def list_sessions(ctx: click.Context, year: Optional[int]) -> None:
    """List this year's sessions, newest first.

    \b
    Examples:
      pokerlog list
      pokerlog list --year 2024
    """
    today = date.today()
    year = year or today.year
    symbol = currency(ctx)

    sessions = filter_year_to_date(get_store(ctx).load(), year, today)
    sessions.sort(key=lambda s: s.date, reverse=True)

    if not sessions:
        console.print(Panel(
            f"[dim]No sessions in {year}[/dim]",
            title="[bold]Sessions[/bold]",
            border_style="dim",
        ))
        return

    table = Table(
        title=f"Sessions (Jan 1 {year} → {today.isoformat()})",
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("Date", style="bold", no_wrap=True)
    table.add_column("Game")
    table.add_column("Stakes / Hours", style="dim")
    table.add_column("Result", justify="right")
    table.add_column("Notes", max_width=30, style="dim")
    table.add_column("ID", style="dim")

    for session in sessions:
        hours = f"{session.hours:.2f}h" if session.hours else "—"
        table.add_row(
            session.date,
            escape(f"{session.type} {session.location}".strip()),
            escape(f"{session.stakes or '-'} • {hours}"),
            money_markup(session.profit, symbol),
            escape(session.notes or ""),
            escape(session.id),
        )

    console.print(table)
