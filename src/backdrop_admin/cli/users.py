"""CLI: backdrop-admin users list|block|unblock"""

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
def users():
    """User accounts."""


@users.command("list")
@click.option("--page", default=1, type=int)
@click.option("--limit", default=20, type=int)
@click.option("--active/--blocked", default=None)
def users_list(page: int, limit: int, active: Optional[bool]):
    """List user accounts."""

    async def _list():
        async with _get_client() as client:
            result = await client.users.list(page=page, limit=limit, status=active)
        table = Table(title=_page_title("Users", result))
        table.add_column("UID", style="bold")
        table.add_column("Name")
        table.add_column("Email")
        table.add_column("Roles")
        table.add_column("Status")
        for u in result.items:
            status = "[green]active[/green]" if u.status else "[red]blocked[/red]"
            table.add_row(str(u.uid), escape(u.name), escape(u.mail or ""), escape(", ".join(u.roles)), status)
        console.print(table)

    _run(_list())


@users.command("block")
@click.argument("uid", type=int)
def users_block(uid: int):
    """Block a user account."""

    async def _block():
        async with _get_client() as client:
            result = await client.users.block(uid)
        console.print(f"[green]{escape(result.message or f'User {uid} blocked.')}[/green]")

    _run(_block())


@users.command("unblock")
@click.argument("uid", type=int)
def users_unblock(uid: int):
    """Unblock a user account."""

    async def _unblock():
        async with _get_client() as client:
            result = await client.users.unblock(uid)
        console.print(f"[green]{escape(result.message or f'User {uid} unblocked.')}[/green]")

    _run(_unblock())
