"""
Site address normalization.

Turns whatever the user typed into the site field into an absolute base URL,
plus the `Host` header to send when the site is reached through a bare IPv4
address (local network / DDEV router setups).
"""

import re
from typing import Optional

import httpx
from pydantic import BaseModel

from backdrop_admin.errors import InvalidAddressError

DEFAULT_COMPAT_HOST = "backdrop-for-ios.ddev.site"

_IPV4_RE = re.compile(r"^\d+\.\d+\.\d+\.\d+$")
_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.-]*)://")
_LABEL = r"[A-Za-z0-9_](?:[A-Za-z0-9_-]*[A-Za-z0-9_])?"
_HOSTNAME_RE = re.compile(rf"^{_LABEL}(?:\.{_LABEL})*\.?$")

# Virtual host names we know how to pick out of free-form input
KNOWN_VHOST_PATTERNS = (
    re.compile(r"[a-zA-Z0-9-]+\.ddev\.site"),
)


class NormalizedAddress(BaseModel):
    base_url: str
    host: str
    is_ip: bool = False
    host_header: Optional[str] = None

    @property
    def scheme(self) -> str:
        return self.base_url.split("://", 1)[0]


def is_ip_address(host: str) -> bool:
    return bool(_IPV4_RE.match(host or ""))


def _recover_vhost(raw: str) -> Optional[str]:
    for pattern in KNOWN_VHOST_PATTERNS:
        match = pattern.search(raw)
        if match:
            return match.group(0)
    return None


def normalize_address(raw: str, default_host: str = DEFAULT_COMPAT_HOST) -> NormalizedAddress:
    """Normalize a user-entered site address.

    - Explicit http/https schemes are kept; other schemes are rejected.
    - Without a scheme, IPv4 hosts get http and hostnames get https.
    - https on an IPv4 host is downgraded to http (self-signed certificates).
    - IPv4 hosts get a compatibility Host header: a *.ddev.site name found in
      the input, or `default_host`.
    - Bracketed IPv6 literals are kept bracketed; they follow the hostname
      rules above.
    """
    text = (raw or "").strip()
    if not text:
        raise InvalidAddressError("Site URL is empty")

    match = _SCHEME_RE.match(text)
    if match:
        scheme = match.group(1).lower()
        if scheme not in ("http", "https"):
            raise InvalidAddressError(f"Unsupported URL scheme: {scheme}")
        rest = text[match.end():]
    else:
        scheme = None
        rest = text

    if "\\" in rest:
        raise InvalidAddressError("Site URL contains a backslash")

    # neutral scheme so explicit ports survive parsing
    try:
        parsed = httpx.URL(f"tcp://{rest}")
    except httpx.InvalidURL as e:
        raise InvalidAddressError(f"Invalid site URL: {e}")

    host = parsed.host
    if not host:
        raise InvalidAddressError("Site URL has no host")

    # httpx percent-encodes illegal host characters instead of rejecting them
    raw_host = parsed.raw_host.decode("ascii", errors="replace")
    is_ipv6 = ":" in raw_host
    if not is_ipv6 and not _HOSTNAME_RE.match(raw_host):
        raise InvalidAddressError(f"Invalid host in site URL: {host}")

    is_ip = is_ip_address(host)
    if scheme is None:
        scheme = "http" if is_ip else "https"
    elif scheme == "https" and is_ip:
        scheme = "http"

    authority = f"[{raw_host}]" if is_ipv6 else raw_host
    if parsed.port is not None:
        authority = f"{authority}:{parsed.port}"
    base_url = f"{scheme}://{authority}{parsed.path}".rstrip("/")

    host_header = None
    if is_ip:
        host_header = _recover_vhost(text) or default_host

    return NormalizedAddress(base_url=base_url, host=host, is_ip=is_ip, host_header=host_header)
