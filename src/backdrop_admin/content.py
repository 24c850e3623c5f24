"""
Content API — list, view, create and edit nodes.
"""

from __future__ import annotations

from typing import Any, Optional

from backdrop_admin.models.content import ContentDetail, ContentItem
from backdrop_admin.models.page import DEFAULT_LIMIT, Page, page_params
from backdrop_admin.transport.envelope import decode_envelope
from backdrop_admin.transport.http import HttpClient


class ContentAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(
        self,
        page: int = 1,
        limit: int = DEFAULT_LIMIT,
        type: Optional[str] = None,
        status: Optional[bool] = None,
    ) -> Page[ContentItem]:
        """List content — GET content/list"""
        params: dict[str, Any] = page_params(page, limit)
        if type:
            params["type"] = type
        if status is not None:
            params["status"] = int(status)
        raw = await self._http.get("content/list", params=params)
        return decode_envelope(raw, Page[ContentItem], require_data=True)

    async def get(self, nid: int) -> ContentDetail:
        """Get one node — GET content/{nid}"""
        raw = await self._http.get(f"content/{nid}")
        return decode_envelope(raw, ContentDetail, require_data=True)

    async def create(self, fields: dict[str, Any]) -> ContentDetail:
        """Create a node — POST content/create. `fields` needs at least type and title."""
        raw = await self._http.post("content/create", fields)
        return decode_envelope(raw, ContentDetail, require_data=True)

    async def update(self, nid: int, fields: dict[str, Any]) -> ContentDetail:
        """Update a node — PUT content/{nid}"""
        raw = await self._http.put(f"content/{nid}", fields)
        return decode_envelope(raw, ContentDetail, require_data=True)
