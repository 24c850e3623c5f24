"""
Backdrop Admin CLI — `backdrop-admin` command.

Commands:
  backdrop-admin auth login            Log in to a Backdrop site
  backdrop-admin cache clear           Flush all caches
  backdrop-admin cron run              Run cron
  backdrop-admin status                Status report
  backdrop-admin content <cmd>         Content list/show
  backdrop-admin logs <cmd>            Recent log messages
  backdrop-admin comments <cmd>        Comment moderation
  backdrop-admin users <cmd>           User accounts
  backdrop-admin files <cmd>           Managed files
  backdrop-admin blocks <cmd>          Layout blocks
"""

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.markup import escape
except ImportError:
    raise SystemExit("CLI requires extras: pip install backdrop-admin[cli]")

from backdrop_admin.client import AsyncBackdropAdmin
from backdrop_admin.errors import BackdropAdminError
from backdrop_admin.models.page import Page
from backdrop_admin.session import Session

console = Console()
CONFIG_FILE = Path(os.environ.get("BACKDROP_ADMIN_CONFIG", Path.home() / ".backdrop-admin" / "config.json"))


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _new_client(session: Optional[Session] = None) -> AsyncBackdropAdmin:
    return AsyncBackdropAdmin(session=session)


def _get_client() -> AsyncBackdropAdmin:
    cfg = _load_config()
    if not cfg.get("cookie") or not cfg.get("base_url"):
        console.print("[red]Not logged in. Run `backdrop-admin auth login` first.[/red]")
        raise SystemExit(1)
    session = Session.authenticated(
        base_url=cfg["base_url"],
        cookie=cfg["cookie"],
        host_header=cfg.get("host_header"),
        username=cfg.get("username"),
    )
    return _new_client(session)


def _run(coro: Any) -> Any:
    """Run a command coroutine; API errors become a red message and exit code 1."""
    try:
        return asyncio.run(coro)
    except BackdropAdminError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)


def _page_title(label: str, page: Page) -> str:
    return f"{label} (page {page.page}/{page.pages or 1}, {page.total} total)"


def _dump(model: Any) -> None:
    click.echo(json.dumps(model.model_dump(mode="json"), indent=2))


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP traffic")
def main(verbose: bool):
    """Backdrop Admin CLI — administer a Backdrop CMS site from the terminal."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


# Register subcommands from separate modules
from backdrop_admin.cli.auth import auth
from backdrop_admin.cli.system import cache, cron, status_cmd
from backdrop_admin.cli.content import content
from backdrop_admin.cli.logs import logs
from backdrop_admin.cli.comments import comments
from backdrop_admin.cli.users import users
from backdrop_admin.cli.files import files
from backdrop_admin.cli.blocks import blocks

main.add_command(auth)
main.add_command(cache)
main.add_command(cron)
main.add_command(status_cmd)
main.add_command(content)
main.add_command(logs)
main.add_command(comments)
main.add_command(users)
main.add_command(files)
main.add_command(blocks)


if __name__ == "__main__":
    main()
