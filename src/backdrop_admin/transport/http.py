"""
REST HTTP client for the Backdrop admin API.

Every admin call goes to {base}/api/admin/{endpoint} with the session cookie,
a JSON content type and, for sites addressed by IP, a compatibility Host header.
"""

import json
import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, Union

import httpx

from backdrop_admin.address import DEFAULT_COMPAT_HOST, is_ip_address
from backdrop_admin.errors import HTTPStatusError, InvalidURLError, ServerError, TransportError
from backdrop_admin.session import Session
from backdrop_admin.transport.envelope import decode_error_body

logger = logging.getLogger(__name__)

API_PREFIX = "/api/admin/"
DEFAULT_TIMEOUT = 30.0
USER_AGENT = "backdrop-admin/0.1.0"

Body = Union[bytes, str, dict[str, Any], list[Any], None]


class InFlight:
    """Counts outstanding requests. `active` stays true until the last one finishes."""

    def __init__(self, on_change: Optional[Callable[[bool], None]] = None):
        self._count = 0
        self._on_change = on_change

    @property
    def count(self) -> int:
        return self._count

    @property
    def active(self) -> bool:
        return self._count > 0

    def on_change(self, handler: Optional[Callable[[bool], None]]) -> None:
        self._on_change = handler

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.active)

    @contextmanager
    def track(self) -> Iterator[None]:
        self._count += 1
        if self._count == 1:
            self._notify()
        try:
            yield
        finally:
            self._count -= 1
            if self._count == 0:
                self._notify()


class HttpClient:
    def __init__(
        self,
        session: Session,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT,
        default_host: str = DEFAULT_COMPAT_HOST,
    ):
        self._session = session
        self._default_host = default_host
        self.in_flight = InFlight()
        self._client = httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            timeout=timeout,
            follow_redirects=False,
            transport=transport,
        )

    @property
    def session(self) -> Session:
        return self._session

    @property
    def cookies(self) -> httpx.Cookies:
        return self._client.cookies

    @property
    def is_loading(self) -> bool:
        return self.in_flight.active

    def build_url(self, endpoint: str) -> str:
        base_url = self._session.base_url
        if not base_url:
            raise InvalidURLError("No site URL configured")
        try:
            return str(httpx.URL(base_url.rstrip("/") + API_PREFIX + endpoint.lstrip("/")))
        except httpx.InvalidURL as e:
            raise InvalidURLError(f"Invalid URL: {e}")

    def _host_header(self) -> Optional[str]:
        base_url = self._session.base_url or ""
        try:
            host = httpx.URL(base_url).host
        except httpx.InvalidURL:
            return None
        if not is_ip_address(host):
            return None
        return self._session.host_header or self._default_host

    def _headers(self, content_type: Optional[str] = "application/json") -> dict[str, str]:
        headers: dict[str, str] = {}
        if content_type:
            headers["Content-Type"] = content_type
        host = self._host_header()
        if host:
            headers["Host"] = host
        headers.update(self._session.auth_headers())
        return headers

    @staticmethod
    def _encode(body: Body) -> Optional[bytes]:
        if body is None or isinstance(body, bytes):
            return body
        if isinstance(body, str):
            return body.encode("utf-8")
        return json.dumps(body).encode("utf-8")

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        logger.debug("%s %s", method, url)
        with self.in_flight.track():
            try:
                resp = await self._client.request(method, url, **kwargs)
            except httpx.InvalidURL as e:
                raise InvalidURLError(f"Invalid URL: {e}")
            except httpx.HTTPError as e:
                logger.warning("%s %s failed: %s", method, url, e)
                raise TransportError(f"Request failed: {e}")
        logger.debug("%s %s -> %d", method, url, resp.status_code)
        return resp

    @staticmethod
    def _check(resp: httpx.Response) -> bytes:
        if 200 <= resp.status_code <= 299:
            return resp.content
        error = decode_error_body(resp.content)
        logger.warning("HTTP %d from %s", resp.status_code, resp.request.url)
        if error is not None:
            raise ServerError(error.message, status_code=resp.status_code, server_code=error.code)
        raise HTTPStatusError(resp.status_code)

    async def execute(
        self,
        endpoint: str,
        method: str = "GET",
        body: Body = None,
        params: Optional[dict[str, Any]] = None,
    ) -> bytes:
        """Run one authenticated admin API call and return the raw response body."""
        self._session.require_authenticated()
        url = self.build_url(endpoint)
        resp = await self._send(
            method.upper(), url,
            content=self._encode(body),
            params=params,
            headers=self._headers(),
        )
        return self._check(resp)

    async def get(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> bytes:
        return await self.execute(endpoint, "GET", params=params)

    async def post(self, endpoint: str, body: Body = None) -> bytes:
        return await self.execute(endpoint, "POST", body)

    async def put(self, endpoint: str, body: Body = None) -> bytes:
        return await self.execute(endpoint, "PUT", body)

    async def delete(self, endpoint: str) -> bytes:
        return await self.execute(endpoint, "DELETE")

    async def upload(self, endpoint: str, filename: str, content: bytes, field: str = "file") -> bytes:
        """Multipart form upload."""
        self._session.require_authenticated()
        url = self.build_url(endpoint)
        resp = await self._send(
            "POST", url,
            files={field: (filename, content)},
            headers=self._headers(content_type=None),
        )
        return self._check(resp)

    async def submit_login(self, url: str, form: dict[str, str], host_header: Optional[str] = None) -> httpx.Response:
        """Unauthenticated form POST used by the login flow. Returns the raw response."""
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        if host_header:
            headers["Host"] = host_header
        return await self._send("POST", url, data=form, headers=headers)

    async def close(self) -> None:
        await self._client.aclose()
