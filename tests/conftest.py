"""Shared fixtures: a fake Backdrop site served through httpx.MockTransport."""

import inspect
import json
from typing import Any, Callable, Optional

import httpx
import pytest

from backdrop_admin import AsyncBackdropAdmin, Session

SITE_IP = "192.168.30.85"
BASE_URL = f"http://{SITE_IP}"
COOKIE = "SESS6f1c2b=Zk3bq9"

Responder = Callable[[httpx.Request], Any]


def envelope(data: Any = None, success: bool = True, message: Optional[str] = None) -> dict[str, Any]:
    return {"success": success, "message": message, "data": data}


class FakeSite:
    """Route table keyed by (method, path). Records every request it receives."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Responder] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json_body: Any = None,
        content: Optional[bytes] = None,
        headers: Optional[list[tuple[str, str]]] = None,
    ) -> None:
        if content is None and json_body is not None:
            content = json.dumps(json_body).encode()
        body = content or b""
        self.routes[(method, path)] = lambda request: httpx.Response(status, content=body, headers=headers)

    def add_handler(self, method: str, path: str, handler: Callable[[httpx.Request], Any]) -> None:
        self.routes[(method, path)] = handler

    def api(self, method: str, endpoint: str, data: Any = None, **kwargs: Any) -> None:
        """Shortcut for an admin endpoint answering with a success envelope."""
        kwargs.setdefault("json_body", envelope(data))
        self.add(method, f"/api/admin/{endpoint}", **kwargs)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, content=b"Not Found")
        result = route(request)
        if inspect.isawaitable(result):
            result = await result
        return result

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def site() -> FakeSite:
    return FakeSite()


@pytest.fixture
def session() -> Session:
    return Session.authenticated(BASE_URL, COOKIE, host_header="backdrop-for-ios.ddev.site", username="admin")


@pytest.fixture
def client(site: FakeSite, session: Session) -> AsyncBackdropAdmin:
    return AsyncBackdropAdmin(session=session, transport=site.transport)


@pytest.fixture
def anonymous_client(site: FakeSite) -> AsyncBackdropAdmin:
    return AsyncBackdropAdmin(transport=site.transport)
