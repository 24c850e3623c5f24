"""CLI: backdrop-admin blocks list|reorder"""

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


@click.group()
def blocks():
    """Layout blocks."""


@blocks.command("list")
@click.option("--layout", default=None, help="Only show blocks of this layout")
def blocks_list(layout: Optional[str]):
    """List blocks by layout and region."""

    async def _list():
        async with _get_client() as client:
            result = await client.blocks.list()
        rows = [b for b in result if layout is None or b.layout == layout]
        rows.sort(key=lambda b: (b.layout, b.region, b.weight))
        table = Table(title=f"Blocks ({len(rows)})")
        table.add_column("Layout")
        table.add_column("Region")
        table.add_column("Weight", justify="right")
        table.add_column("Block", style="bold")
        table.add_column("UUID", style="dim")
        for b in rows:
            table.add_row(escape(b.layout), escape(b.region), str(b.weight), escape(b.label or f"{b.module}:{b.delta}"), escape(b.uuid))
        console.print(table)

    _run(_list())


@blocks.command("reorder")
@click.argument("layout")
@click.argument("region")
@click.argument("uuids", nargs=-1, required=True)
def blocks_reorder(layout: str, region: str, uuids: tuple):
    """Set the order of blocks in a region (UUIDs, first to last)."""

    async def _reorder():
        async with _get_client() as client:
            result = await client.blocks.reorder(layout, region, list(uuids))
        console.print(f"[green]{escape(result.message or 'Block order saved.')}[/green]")

    _run(_reorder())
