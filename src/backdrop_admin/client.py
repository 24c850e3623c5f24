"""
AsyncBackdropAdmin / BackdropAdmin — main SDK clients.
"""

import asyncio
import inspect
from typing import Any, Optional

import httpx

from backdrop_admin.address import DEFAULT_COMPAT_HOST
from backdrop_admin.auth import Auth
from backdrop_admin.blocks import BlocksAPI
from backdrop_admin.comments import CommentsAPI
from backdrop_admin.content import ContentAPI
from backdrop_admin.files import FilesAPI
from backdrop_admin.models.auth import LoginTrace
from backdrop_admin.reports import ReportsAPI
from backdrop_admin.session import Session
from backdrop_admin.system import SystemAPI
from backdrop_admin.transport.http import DEFAULT_TIMEOUT, HttpClient
from backdrop_admin.users import UsersAPI


class AsyncBackdropAdmin:
    """Async Backdrop admin client (primary)."""

    def __init__(
        self,
        session: Optional[Session] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT,
        default_host: str = DEFAULT_COMPAT_HOST,
    ):
        self.session = session or Session()
        self.http = HttpClient(self.session, transport=transport, timeout=timeout, default_host=default_host)
        self.auth = Auth(self.http, self.session, default_host=default_host)

        self.system = SystemAPI(self.http)
        self.reports = ReportsAPI(self.http)
        self.content = ContentAPI(self.http)
        self.comments = CommentsAPI(self.http)
        self.blocks = BlocksAPI(self.http)
        self.files = FilesAPI(self.http)
        self.users = UsersAPI(self.http)

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    @property
    def is_loading(self) -> bool:
        return self.http.is_loading

    async def login(self, site_address: str, username: str, password: str) -> LoginTrace:
        return await self.auth.login(site_address, username, password)

    def logout(self) -> None:
        self.auth.logout()

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncBackdropAdmin":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()


class _SyncAPI:
    """Runs every coroutine method of an async feature API on the owning loop."""

    def __init__(self, api: Any, run: Any):
        self._api = api
        self._run = run

    def __getattr__(self, name: str) -> Any:
        attr = getattr(self._api, name)
        if not inspect.iscoroutinefunction(attr):
            return attr

        def call(*args: Any, **kwargs: Any) -> Any:
            return self._run(attr(*args, **kwargs))
        return call


class BackdropAdmin:
    """Sync wrapper around AsyncBackdropAdmin. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._async = AsyncBackdropAdmin(**kwargs)
        self._loop = asyncio.new_event_loop()
        self.system = _SyncAPI(self._async.system, self._run)
        self.reports = _SyncAPI(self._async.reports, self._run)
        self.content = _SyncAPI(self._async.content, self._run)
        self.comments = _SyncAPI(self._async.comments, self._run)
        self.blocks = _SyncAPI(self._async.blocks, self._run)
        self.files = _SyncAPI(self._async.files, self._run)
        self.users = _SyncAPI(self._async.users, self._run)

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def session(self) -> Session:
        return self._async.session

    @property
    def is_authenticated(self) -> bool:
        return self._async.is_authenticated

    @property
    def last_trace(self) -> Optional[LoginTrace]:
        return self._async.auth.last_trace

    def login(self, site_address: str, username: str, password: str) -> LoginTrace:
        return self._run(self._async.login(site_address, username, password))

    def logout(self) -> None:
        self._async.logout()

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()

    def __enter__(self) -> "BackdropAdmin":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
