"""
Comments API — moderation queue.
"""

from __future__ import annotations

from typing import Any, Optional

from backdrop_admin.models.envelope import ActionResult
from backdrop_admin.models.page import DEFAULT_LIMIT, Page, page_params
from backdrop_admin.models.people import Comment
from backdrop_admin.transport.envelope import decode_action, decode_envelope
from backdrop_admin.transport.http import HttpClient


class CommentsAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(self, page: int = 1, limit: int = DEFAULT_LIMIT, status: Optional[bool] = None) -> Page[Comment]:
        """List comments — GET comments/list. status=False lists the approval queue."""
        params: dict[str, Any] = page_params(page, limit)
        if status is not None:
            params["status"] = int(status)
        raw = await self._http.get("comments/list", params=params)
        return decode_envelope(raw, Page[Comment], require_data=True)

    async def _action(self, cid: int, action: str) -> ActionResult:
        return decode_action(await self._http.post(f"comments/{cid}/{action}"))

    async def approve(self, cid: int) -> ActionResult:
        return await self._action(cid, "approve")

    async def unpublish(self, cid: int) -> ActionResult:
        return await self._action(cid, "unpublish")

    async def delete(self, cid: int) -> ActionResult:
        return await self._action(cid, "delete")
