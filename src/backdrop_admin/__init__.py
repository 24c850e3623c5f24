"""
backdrop-admin — Backdrop CMS administration client for Python.

Logs in to a Backdrop site and drives its admin API
(cache, cron, reports, content, comments, users, files, blocks).
"""

from backdrop_admin.client import BackdropAdmin, AsyncBackdropAdmin
from backdrop_admin.address import normalize_address, NormalizedAddress
from backdrop_admin.auth import Auth
from backdrop_admin.session import Session
from backdrop_admin.files import BytesFile, LocalFile
from backdrop_admin.errors import (
    BackdropAdminError,
    InvalidAddressError,
    LoginFailedError,
    NotAuthenticatedError,
    InvalidURLError,
    InvalidResponseError,
    HTTPStatusError,
    ServerError,
    TransportError,
)

__version__ = "0.1.0"
__all__ = [
    "BackdropAdmin",
    "AsyncBackdropAdmin",
    "Auth",
    "Session",
    "NormalizedAddress",
    "normalize_address",
    "BytesFile",
    "LocalFile",
    "BackdropAdminError",
    "InvalidAddressError",
    "LoginFailedError",
    "NotAuthenticatedError",
    "InvalidURLError",
    "InvalidResponseError",
    "HTTPStatusError",
    "ServerError",
    "TransportError",
]
