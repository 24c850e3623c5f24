"""CLI: backdrop-admin content list|show"""

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


def _dump(model):
    from backdrop_admin.cli.main import _dump
    _dump(model)


def _page_title(label, page):
    from backdrop_admin.cli.main import _page_title
    return _page_title(label, page)


@click.group()
def content():
    """Content management."""


@content.command("list")
@click.option("--page", default=1, type=int)
@click.option("--limit", default=20, type=int)
@click.option("--type", "content_type", default=None, help="Content type, e.g. page or post")
@click.option("--published/--unpublished", default=None)
@click.option("--json-output", "--json", is_flag=True)
def content_list(page: int, limit: int, content_type: Optional[str], published: Optional[bool], json_output: bool):
    """List content."""

    async def _list():
        async with _get_client() as client:
            result = await client.content.list(page=page, limit=limit, type=content_type, status=published)
        if json_output:
            _dump(result)
            return
        table = Table(title=_page_title("Content", result))
        table.add_column("NID", style="bold")
        table.add_column("Title")
        table.add_column("Type")
        table.add_column("Author")
        table.add_column("Status")
        for item in result.items:
            status = "[green]published[/green]" if item.status else "[yellow]unpublished[/yellow]"
            table.add_row(str(item.nid), escape(item.title), escape(item.type), escape(item.author or ""), status)
        console.print(table)

    _run(_list())


@content.command("show")
@click.argument("nid", type=int)
def content_show(nid: int):
    """Show one content item."""

    async def _show():
        async with _get_client() as client:
            item = await client.content.get(nid)
        _dump(item)

    _run(_show())
