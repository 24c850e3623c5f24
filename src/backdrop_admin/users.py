"""
Users API — accounts list and blocking.
"""

from __future__ import annotations

from typing import Any, Optional

from backdrop_admin.models.envelope import ActionResult
from backdrop_admin.models.page import DEFAULT_LIMIT, Page, page_params
from backdrop_admin.models.people import User
from backdrop_admin.transport.envelope import decode_action, decode_envelope
from backdrop_admin.transport.http import HttpClient


class UsersAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(self, page: int = 1, limit: int = DEFAULT_LIMIT, status: Optional[bool] = None) -> Page[User]:
        """GET users/list"""
        params: dict[str, Any] = page_params(page, limit)
        if status is not None:
            params["status"] = int(status)
        raw = await self._http.get("users/list", params=params)
        return decode_envelope(raw, Page[User], require_data=True)

    async def get(self, uid: int) -> User:
        """GET users/{uid}"""
        raw = await self._http.get(f"users/{uid}")
        return decode_envelope(raw, User, require_data=True)

    async def block(self, uid: int) -> ActionResult:
        return decode_action(await self._http.post(f"users/{uid}/block"))

    async def unblock(self, uid: int) -> ActionResult:
        return decode_action(await self._http.post(f"users/{uid}/unblock"))
