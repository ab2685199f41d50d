"""Statistics commands for pokerlog CLI.

Shows year-to-date totals, best month/day/weekday, and monthly and
weekday breakdowns.
"""

from datetime import date, datetime
from typing import Optional

import click
from rich.columns import Columns
from rich.panel import Panel
from rich.table import Table

from pokerlog.analytics import available_years, build_report
from pokerlog.cli.common import console, currency, format_money, get_store, money_markup
from pokerlog.models import Bucket


def describe_best(bucket: Optional[Bucket], title: str, symbol: str) -> Panel:
    """Render one best-bucket card, or 'No sessions yet' when there is none."""
    if bucket is None:
        text = "[bold]—[/bold]\n[dim]No sessions yet[/dim]"
    else:
        color = "green" if bucket.profit >= 0 else "red"
        text = (
            f"[bold {color}]{bucket.label}[/bold {color}]\n"
            f"[dim]{format_money(bucket.profit, symbol)} • {bucket.sessions} sess • "
            f"{bucket.hours:.2f}h[/dim]"
        )
    return Panel(text, title=f"[bold]{title}[/bold]", border_style="cyan")


def _with_year(bucket: Optional[Bucket], year: int) -> Optional[Bucket]:
    # "Jan" -> "Jan 2024"
    if bucket is None:
        return None
    return bucket.model_copy(update={"label": f"{bucket.label} {year}"})


def _bucket_table(title: str, first_column: str, buckets: list[Bucket], symbol: str) -> Table:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column(first_column, style="bold")
    table.add_column("Profit", justify="right")
    table.add_column("Sessions", justify="right")
    table.add_column("Hours", justify="right")

    for bucket in buckets:
        table.add_row(
            bucket.label,
            money_markup(bucket.profit, symbol),
            str(bucket.sessions),
            f"{bucket.hours:.2f}",
        )
    return table


@click.command()
@click.option("--year", type=click.IntRange(1, 9999), default=None, help="Year to report on (default: current year).")
@click.option(
    "--as-of",
    "as_of",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Last day to include (YYYY-MM-DD). Defaults to today.",
)
@click.pass_context
def stats(ctx: click.Context, year: Optional[int], as_of: Optional[datetime]) -> None:
    """Display year-to-date statistics.

    Covers Jan 1 of the year through today: total profit, session
    count, average per session, hourly rate, the best month, day and
    weekday, and monthly and weekday tables.

    \b
    Examples:
      pokerlog stats
      pokerlog stats --year 2024
      pokerlog stats --year 2024 --as-of 2024-06-30
    """
    as_of = as_of or datetime.now()
    year = year or as_of.year
    symbol = currency(ctx)

    report = build_report(get_store(ctx), year, as_of)
    summary = report.summary

    profit_color = "green" if summary.total_profit >= 0 else "red"
    kpi_text = (
        f"[bold]Year to Date[/bold] ([dim]Jan 1 {year} → {report.end.isoformat()}[/dim])\n\n"
        f"Total Profit:  [bold {profit_color}]{format_money(summary.total_profit, symbol)}"
        f"[/bold {profit_color}]\n"
        f"Sessions:      {summary.session_count}\n"
        f"Avg / Session: {format_money(summary.avg_profit_per_session, symbol)}\n"
        f"Hourly:        {format_money(summary.hourly_rate, symbol)}/hr\n"
        f"Hours:         {summary.total_hours:.2f}"
    )
    console.print(Panel(
        kpi_text,
        title="[bold cyan]Stats[/bold cyan]",
        border_style="cyan",
    ))

    console.print(Columns([
        describe_best(_with_year(report.best_month, year), "Best Month", symbol),
        describe_best(report.best_day, "Best Day", symbol),
        describe_best(report.best_weekday, "Best Weekday", symbol),
    ]))

    months = [_with_year(b, year) for b in report.months]
    console.print(_bucket_table("By Month", "Month", months, symbol))
    console.print(_bucket_table("By Weekday", "Day", report.weekdays, symbol))


@click.command()
@click.pass_context
def years(ctx: click.Context) -> None:
    """List years with sessions, newest first."""
    sessions = get_store(ctx).load()
    for year in available_years(sessions, date.today()):
        count = sum(1 for s in sessions if s.date.startswith(f"{year:04d}-"))
        console.print(f"{year}  [dim]{count} sessions[/dim]")
