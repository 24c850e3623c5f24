"""CLI: backdrop-admin comments list|approve|unpublish|delete"""

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
def comments():
    """Comment moderation."""


@comments.command("list")
@click.option("--page", default=1, type=int)
@click.option("--limit", default=20, type=int)
@click.option("--published/--unapproved", default=None)
def comments_list(page: int, limit: int, published: Optional[bool]):
    """List comments."""

    async def _list():
        async with _get_client() as client:
            result = await client.comments.list(page=page, limit=limit, status=published)
        table = Table(title=_page_title("Comments", result))
        table.add_column("CID", style="bold")
        table.add_column("Subject")
        table.add_column("Author")
        table.add_column("Posted in")
        table.add_column("Status")
        for c in result.items:
            status = "[green]published[/green]" if c.status else "[yellow]unapproved[/yellow]"
            table.add_row(str(c.cid), escape(c.subject), escape(c.author or ""), escape(c.node_title or str(c.nid)), status)
        console.print(table)

    _run(_list())


def _moderate(cid: int, action: str, done: str) -> None:
    async def _act():
        async with _get_client() as client:
            result = await getattr(client.comments, action)(cid)
        console.print(f"[green]{escape(result.message or done)}[/green]")

    _run(_act())


@comments.command("approve")
@click.argument("cid", type=int)
def comments_approve(cid: int):
    """Publish a comment."""
    _moderate(cid, "approve", f"Comment {cid} approved.")


@comments.command("unpublish")
@click.argument("cid", type=int)
def comments_unpublish(cid: int):
    """Unpublish a comment."""
    _moderate(cid, "unpublish", f"Comment {cid} unpublished.")


@comments.command("delete")
@click.argument("cid", type=int)
@click.confirmation_option(prompt="Delete this comment?")
def comments_delete(cid: int):
    """Delete a comment."""
    _moderate(cid, "delete", f"Comment {cid} deleted.")
