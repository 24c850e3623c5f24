"""
Auth module — Backdrop form login and logout.

Login posts the standard user login form and picks the session cookie
(SESS…/SSESS…) out of the response. The session is only touched once a
cookie has been found, so a failed login leaves it as it was.
"""

import logging
from typing import Optional

import httpx

from backdrop_admin.address import DEFAULT_COMPAT_HOST, NormalizedAddress, normalize_address
from backdrop_admin.errors import LoginFailedError, TransportError
from backdrop_admin.models.auth import BODY_PREVIEW_CHARS, LoginTrace
from backdrop_admin.session import Session
from backdrop_admin.transport.http import HttpClient

logger = logging.getLogger(__name__)

LOGIN_PATH = "/user/login"
LOGIN_FORM_ID = "user_login_form"
SESSION_COOKIE_PREFIXES = ("SESS", "SSESS")


def is_session_cookie(name: str) -> bool:
    return name.startswith(SESSION_COOKIE_PREFIXES)


def mask_cookie(cookie: str) -> str:
    name, _, value = cookie.partition("=")
    return f"{name}={value[:4]}…" if value else name


def cookie_from_headers(headers: httpx.Headers) -> Optional[str]:
    """First session cookie found in the Set-Cookie headers, as "name=value"."""
    for header in headers.get_list("set-cookie"):
        name_value = header.split(";", 1)[0].strip()
        name, sep, value = name_value.partition("=")
        name, value = name.strip(), value.strip()
        if sep and value and is_session_cookie(name):
            return f"{name}={value}"
    return None


def cookie_from_jar(cookies: httpx.Cookies, hosts: tuple[str, ...]) -> Optional[str]:
    for cookie in cookies.jar:
        domain = (cookie.domain or "").lstrip(".")
        if domain and not any(h == domain or h.endswith("." + domain) for h in hosts):
            continue
        if cookie.value and is_session_cookie(cookie.name):
            return f"{cookie.name}={cookie.value}"
    return None


class Auth:
    def __init__(self, http: HttpClient, session: Session, default_host: str = DEFAULT_COMPAT_HOST):
        self._http = http
        self._session = session
        self._default_host = default_host
        self.last_trace: Optional[LoginTrace] = None

    @property
    def is_authenticated(self) -> bool:
        return self._session.is_authenticated

    async def login(self, site_address: str, username: str, password: str) -> LoginTrace:
        """Log in to the site. Returns the diagnostic trace; raises LoginFailedError."""
        address = normalize_address(site_address, default_host=self._default_host)
        login_url = address.base_url + LOGIN_PATH
        trace = LoginTrace(request_url=login_url, host_header=address.host_header)
        self.last_trace = trace

        form = {"name": username, "pass": password, "form_id": LOGIN_FORM_ID}
        self._http.cookies.clear()
        try:
            resp = await self._http.submit_login(login_url, form, host_header=address.host_header)
        except TransportError as e:
            trace.notes.append(f"✗ {e}")
            raise

        cookie = cookie_from_headers(resp.headers)
        if cookie is None:
            hosts = tuple(h for h in (address.host, address.host_header) if h)
            cookie = cookie_from_jar(self._http.cookies, hosts)
        self._http.cookies.clear()

        self._record(trace, resp)
        if resp.status_code not in (200, 302):
            trace.notes.append(f"✗ Login failed - Status code: {resp.status_code}")
            logger.warning("Login to %s failed with HTTP %d", address.base_url, resp.status_code)
            raise LoginFailedError(details={"status_code": resp.status_code})
        if cookie is None:
            trace.notes.append("✗ No session cookie found")
            logger.warning("Login to %s returned no session cookie", address.base_url)
            raise LoginFailedError(details={"status_code": resp.status_code})

        trace.notes.append(f"✓ Session cookie found: {mask_cookie(cookie)}")
        self._establish(address, cookie, username)
        return trace

    def _establish(self, address: NormalizedAddress, cookie: str, username: str) -> None:
        self._session.establish(address, cookie, username=username)
        logger.info("Logged in to %s as %s", address.base_url, username)

    @staticmethod
    def _record(trace: LoginTrace, resp: httpx.Response) -> None:
        trace.status_code = resp.status_code
        for key, value in resp.headers.multi_items():
            if key.lower() == "set-cookie":
                value = mask_cookie(value.split(";", 1)[0])
            trace.headers.append((key, value))
        trace.body_preview = resp.text[:BODY_PREVIEW_CHARS]

    def logout(self) -> None:
        self._session.clear()
        self._http.cookies.clear()
        self.last_trace = None
        logger.info("Logged out")
