"""CLI: backdrop-admin logs list|clear"""

from datetime import datetime
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def _get_client():
    from backdrop_admin.cli.main import _get_client
    return _get_client()


def _run(coro):
    from backdrop_admin.cli.main import _run
    return _run(coro)


def _page_title(label, page):
    from backdrop_admin.cli.main import _page_title
    return _page_title(label, page)


@click.group()
def logs():
    """Recent log messages."""


@logs.command("list")
@click.option("--page", default=1, type=int)
@click.option("--limit", default=20, type=int)
@click.option("--severity", default=None, type=click.IntRange(0, 7))
@click.option("--type", "log_type", default=None, help="Message type, e.g. php or user")
def logs_list(page: int, limit: int, severity: Optional[int], log_type: Optional[str]):
    """List recent log messages."""

    async def _list():
        async with _get_client() as client:
            result = await client.reports.logs(page=page, limit=limit, severity=severity, type=log_type)
        table = Table(title=_page_title("Log messages", result))
        table.add_column("Date")
        table.add_column("Type")
        table.add_column("Severity")
        table.add_column("Message")
        table.add_column("User")
        for entry in result.items:
            level = entry.level.name.lower() if entry.level is not None else str(entry.severity)
            date = datetime.fromtimestamp(entry.timestamp).strftime("%Y-%m-%d %H:%M")
            table.add_row(date, escape(entry.type), level, escape(entry.message), escape(entry.username or ""))
        console.print(table)

    _run(_list())


@logs.command("clear")
@click.confirmation_option(prompt="Delete all log messages?")
def logs_clear():
    """Delete all log messages."""

    async def _clear():
        async with _get_client() as client:
            result = await client.reports.clear_logs()
        console.print(f"[green]{escape(result.message or 'Log messages cleared.')}[/green]")

    _run(_clear())
