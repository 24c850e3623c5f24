"""CLI: backdrop-admin auth login|status|logout"""

from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from backdrop_admin.errors import BackdropAdminError

console = Console()

DEFAULT_SITE = "http://192.168.30.85"


def _load_config() -> dict:
    from backdrop_admin.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from backdrop_admin.cli.main import _save_config
    _save_config(cfg)


def _new_client():
    from backdrop_admin.cli.main import _new_client
    return _new_client()


def _run(coro):
    from backdrop_admin.cli.main import _run
    return _run(coro)


@click.group()
def auth():
    """Authentication commands."""


@auth.command("login")
@click.option("--site", default=None, help="Site address, e.g. example.com or 192.168.30.85")
@click.option("--username", "-u", default=None)
@click.option("--password", default=None, help="Prompted for when omitted")
@click.option("--debug", is_flag=True, help="Print the login request/response trace")
def auth_login(site: Optional[str], username: Optional[str], password: Optional[str], debug: bool):
    """Log in with a Backdrop user account."""
    cfg = _load_config()
    site = site or click.prompt("Site URL", default=cfg.get("site", DEFAULT_SITE))
    username = username or click.prompt("Username", default=cfg.get("username") or None)
    password = password or click.prompt("Password", hide_input=True)

    async def _login():
        async with _new_client() as client:
            try:
                with console.status("Logging in..."):
                    await client.login(site, username, password)
            except BackdropAdminError:
                if debug and client.auth.last_trace:
                    console.print(client.auth.last_trace.render(), markup=False)
                raise
            if debug and client.auth.last_trace:
                console.print(client.auth.last_trace.render(), markup=False)
            session = client.session
            console.print(f"[green]Logged in to {escape(session.base_url)} as {escape(username)}[/green]")
            _save_config({
                "site": site,
                "base_url": session.base_url,
                "host_header": session.host_header,
                "cookie": session.cookie,
                "username": username,
            })
            console.print("[dim]Session saved to the backdrop-admin config file[/dim]")

    _run(_login())


@auth.command("status")
def auth_status():
    """Show current auth status."""
    cfg = _load_config()
    if cfg.get("cookie"):
        host = f" (Host: {cfg['host_header']})" if cfg.get("host_header") else ""
        site = escape(f"{cfg.get('base_url')}{host}")
        console.print(f"[green]Logged in[/green] to {site} as {escape(cfg.get('username') or 'unknown')}")
    else:
        console.print("[yellow]Not logged in. Run `backdrop-admin auth login`.[/yellow]")


@auth.command("logout")
def auth_logout():
    """Clear the saved session."""
    cfg = _load_config()
    # keep the site and username as defaults for the next login
    _save_config({k: cfg[k] for k in ("site", "username") if k in cfg})
    console.print("[green]Logged out.[/green]")
