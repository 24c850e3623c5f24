"""
System actions — cache flush and cron.
"""

from backdrop_admin.models.envelope import ActionResult
from backdrop_admin.models.site import CronResult, CronStatus
from backdrop_admin.transport.envelope import decode_action, decode_envelope
from backdrop_admin.transport.http import HttpClient


class SystemAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def clear_cache(self) -> ActionResult:
        """Flush all caches — POST cache/clear"""
        return decode_action(await self._http.post("cache/clear"))

    async def run_cron(self) -> CronResult:
        """Run cron now — POST cron/run"""
        raw = await self._http.post("cron/run")
        action = decode_action(raw)
        status = decode_envelope(raw, CronStatus) or CronStatus()
        return CronResult(success=action.success, message=action.message, **status.model_dump())
