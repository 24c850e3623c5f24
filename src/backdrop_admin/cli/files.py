"""CLI: backdrop-admin files list|upload|delete"""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from backdrop_admin.files import LocalFile

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
def files():
    """Managed files."""


@files.command("list")
@click.option("--page", default=1, type=int)
@click.option("--limit", default=20, type=int)
def files_list(page: int, limit: int):
    """List managed files."""

    async def _list():
        async with _get_client() as client:
            result = await client.files.list(page=page, limit=limit)
        table = Table(title=_page_title("Files", result))
        table.add_column("FID", style="bold")
        table.add_column("Name")
        table.add_column("Type")
        table.add_column("Size", justify="right")
        table.add_column("URI", style="dim")
        for f in result.items:
            table.add_row(str(f.fid), escape(f.filename), escape(f.filemime), str(f.filesize), escape(f.uri))
        console.print(table)

    _run(_list())


@files.command("upload")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def files_upload(path: str):
    """Upload a local file."""

    async def _upload():
        async with _get_client() as client:
            with console.status(f"Uploading {path}..."):
                uploaded = await client.files.upload(LocalFile(path))
        console.print(f"[green]Uploaded {escape(uploaded.filename)} (FID {uploaded.fid})[/green]")

    _run(_upload())


@files.command("delete")
@click.argument("fid", type=int)
@click.confirmation_option(prompt="Delete this file?")
def files_delete(fid: int):
    """Delete a managed file."""

    async def _delete():
        async with _get_client() as client:
            result = await client.files.delete(fid)
        console.print(f"[green]{escape(result.message or f'File {fid} deleted.')}[/green]")

    _run(_delete())
