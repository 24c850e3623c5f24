"""
Reports — status report and recent log messages.
"""

from typing import Optional

from backdrop_admin.models.envelope import ActionResult
from backdrop_admin.models.page import DEFAULT_LIMIT, Page, page_params
from backdrop_admin.models.reports import LogEntry, StatusReport
from backdrop_admin.transport.envelope import decode_action, decode_envelope
from backdrop_admin.transport.http import HttpClient


class ReportsAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def status(self) -> StatusReport:
        """Site status report — GET reports/status"""
        raw = await self._http.get("reports/status")
        return decode_envelope(raw, StatusReport, require_data=True)

    async def logs(
        self,
        page: int = 1,
        limit: int = DEFAULT_LIMIT,
        severity: Optional[int] = None,
        type: Optional[str] = None,
    ) -> Page[LogEntry]:
        """Recent log messages — GET reports/logs"""
        params: dict = page_params(page, limit)
        if severity is not None:
            params["severity"] = severity
        if type:
            params["type"] = type
        raw = await self._http.get("reports/logs", params=params)
        return decode_envelope(raw, Page[LogEntry], require_data=True)

    async def clear_logs(self) -> ActionResult:
        """Delete all log messages — POST reports/logs/clear"""
        return decode_action(await self._http.post("reports/logs/clear"))
