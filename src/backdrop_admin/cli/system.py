"""CLI: backdrop-admin cache clear | cron run | status"""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from backdrop_admin.models.reports import Severity

console = Console()

SEVERITY_STYLE = {
    Severity.INFO: ("blue", "info"),
    Severity.OK: ("green", "ok"),
    Severity.WARNING: ("yellow", "warning"),
    Severity.ERROR: ("red", "error"),
}


def _get_client():
    from backdrop_admin.cli.main import _get_client
    return _get_client()


def _run(coro):
    from backdrop_admin.cli.main import _run
    return _run(coro)


def _dump(model):
    from backdrop_admin.cli.main import _dump
    _dump(model)


@click.group()
def cache():
    """Cache management."""


@cache.command("clear")
def cache_clear():
    """Flush all caches."""

    async def _clear():
        async with _get_client() as client:
            with console.status("Clearing caches..."):
                result = await client.system.clear_cache()
        console.print(f"[green]{escape(result.message or 'Cache cleared successfully')}[/green]")

    _run(_clear())


@click.group()
def cron():
    """Cron commands."""


@cron.command("run")
def cron_run():
    """Run cron now."""

    async def _cron():
        async with _get_client() as client:
            with console.status("Running cron..."):
                result = await client.system.run_cron()
        console.print(f"[green]{escape(result.message or 'Cron ran successfully')}[/green]")

    _run(_cron())


@click.command("status")
@click.option("--json-output", "--json", is_flag=True)
def status_cmd(json_output):
    """Show the site status report."""

    async def _status():
        async with _get_client() as client:
            with console.status("Loading status report..."):
                report = await client.reports.status()
        if json_output:
            _dump(report)
            return
        table = Table(title="Status Report")
        table.add_column("", no_wrap=True)
        table.add_column("Requirement", style="bold")
        table.add_column("Value")
        table.add_column("Description", style="dim")
        for req in report.requirements:
            style, label = SEVERITY_STYLE.get(req.level, ("white", ""))
            table.add_row(f"[{style}]{label}[/{style}]", escape(req.title), escape(req.value), escape(req.description or ""))
        console.print(table)
        if report.errors:
            console.print(f"[red]{len(report.errors)} error(s)[/red]")

    _run(_status())
