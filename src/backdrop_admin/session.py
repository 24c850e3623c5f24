"""
Session store — the authentication state shared by the auth flow and the
request pipeline. Only login/logout mutate it.
"""

from typing import Optional

from backdrop_admin.address import NormalizedAddress
from backdrop_admin.errors import NotAuthenticatedError


class Session:
    def __init__(self) -> None:
        self._base_url: Optional[str] = None
        self._host_header: Optional[str] = None
        self._cookie: Optional[str] = None
        self._username: Optional[str] = None

    @classmethod
    def authenticated(
        cls,
        base_url: str,
        cookie: str,
        host_header: Optional[str] = None,
        username: Optional[str] = None,
    ) -> "Session":
        """Build a session from previously saved state (e.g. the CLI config)."""
        session = cls()
        session._base_url = base_url.rstrip("/")
        session._cookie = cookie
        session._host_header = host_header
        session._username = username
        return session

    @property
    def base_url(self) -> Optional[str]:
        return self._base_url

    @property
    def host_header(self) -> Optional[str]:
        return self._host_header

    @property
    def cookie(self) -> Optional[str]:
        return self._cookie

    @property
    def username(self) -> Optional[str]:
        return self._username

    @property
    def is_authenticated(self) -> bool:
        return bool(self._base_url and self._cookie)

    def establish(self, address: NormalizedAddress, cookie: str, username: Optional[str] = None) -> None:
        if not cookie:
            raise ValueError("cookie must be non-empty")
        self._base_url = address.base_url
        self._host_header = address.host_header
        self._cookie = cookie
        self._username = username

    def clear(self) -> None:
        self._base_url = None
        self._host_header = None
        self._cookie = None
        self._username = None

    def require_authenticated(self) -> None:
        if not self.is_authenticated:
            raise NotAuthenticatedError()

    def auth_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self._cookie:
            headers["Cookie"] = self._cookie
        return headers

    def __repr__(self) -> str:
        state = "authenticated" if self.is_authenticated else "unauthenticated"
        return f"Session({state}, base_url={self._base_url!r})"
