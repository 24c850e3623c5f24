"""
Site building models — managed files, layout blocks, cron.
"""

from typing import Optional
from pydantic import BaseModel

from backdrop_admin.models.envelope import ActionResult


class ManagedFile(BaseModel):
    fid: int
    filename: str
    uri: str
    filemime: str
    filesize: int
    status: bool = True
    url: Optional[str] = None
    timestamp: Optional[int] = None

    model_config = {"extra": "forbid"}


class Block(BaseModel):
    uuid: str
    module: str
    delta: str
    layout: str
    region: str
    label: Optional[str] = None
    weight: int = 0

    model_config = {"extra": "forbid"}


class CronStatus(BaseModel):
    """payload.data of cron/run.

    last_run is the cron_last timestamp, duration the run time in seconds and
    threshold the automatic-run interval (cron_safe_threshold, 0 = disabled).
    """
    last_run: Optional[int] = None
    duration: Optional[float] = None
    threshold: Optional[int] = None

    model_config = {"extra": "forbid"}


class CronResult(ActionResult):
    last_run: Optional[int] = None
    duration: Optional[float] = None
    threshold: Optional[int] = None
