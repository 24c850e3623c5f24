"""
Blocks API — layout blocks and their order within a region.
"""

from __future__ import annotations

from backdrop_admin.models.envelope import ActionResult
from backdrop_admin.models.site import Block
from backdrop_admin.transport.envelope import decode_action, decode_envelope
from backdrop_admin.transport.http import HttpClient


class BlocksAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(self) -> list[Block]:
        """GET blocks/list"""
        raw = await self._http.get("blocks/list")
        return decode_envelope(raw, list[Block]) or []

    async def reorder(self, layout: str, region: str, block_ids: list[str]) -> ActionResult:
        """Save a new block order for one region — POST blocks/reorder"""
        raw = await self._http.post("blocks/reorder", {
            "layout": layout,
            "region": region,
            "blocks": block_ids,
        })
        return decode_action(raw)
