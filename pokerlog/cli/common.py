"""Shared helpers for pokerlog CLI commands."""

from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from pokerlog.db.store import SessionStore

console = Console()


def get_store(ctx: click.Context) -> SessionStore:
    """Get the session store configured for this invocation."""
    return SessionStore(ctx.obj["db_path"])


def currency(ctx: click.Context) -> str:
    return ctx.obj.get("currency_symbol", "$")


def format_money(value: Optional[float], symbol: str = "$") -> str:
    """Format an amount as ``$12.34`` or ``-$12.34``."""
    v = float(value or 0)
    sign = "-" if v < 0 else ""
    return f"{sign}{symbol}{abs(v):.2f}"


def money_markup(value: float, symbol: str = "$") -> str:
    """Money with rich color markup: green when >= 0, red otherwise."""
    color = "green" if value >= 0 else "red"
    return f"[{color}]{format_money(value, symbol)}[/{color}]"


def fail(message: str, detail: str = "") -> None:
    """Print an error panel and exit with status 1."""
    text = f"[red]{message}[/red]"
    if detail:
        text += f"\n\n{escape(detail)}"
    console.print(Panel(
        text,
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)
