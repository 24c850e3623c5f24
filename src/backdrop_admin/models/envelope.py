"""
Response envelope — every admin endpoint answers with
{"success": bool, "message": str|null, "data": any|null}.
"""

from typing import Any, Optional
from pydantic import BaseModel, StrictBool


class Envelope(BaseModel):
    success: StrictBool
    message: Optional[str] = None
    data: Optional[Any] = None

    model_config = {"extra": "forbid"}


class ApiErrorBody(BaseModel):
    """Body some non-2xx responses carry: {"error": true, "message": ..., "code": ...}"""
    error: bool
    message: str
    code: Optional[int] = None


class ActionResult(BaseModel):
    """Outcome of an endpoint that returns no payload (cache clear, approve, ...)."""
    success: bool = True
    message: Optional[str] = None
