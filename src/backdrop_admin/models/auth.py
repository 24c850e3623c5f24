"""
Login diagnostics — a side-channel record of the last login attempt.
"""

from typing import Optional
from pydantic import BaseModel, Field

BODY_PREVIEW_CHARS = 500


class LoginTrace(BaseModel):
    request_url: str
    host_header: Optional[str] = None
    status_code: Optional[int] = None
    headers: list[tuple[str, str]] = Field(default_factory=list)
    body_preview: Optional[str] = None
    notes: list[str] = Field(default_factory=list)

    def render(self) -> str:
        lines = [f"Request URL: {self.request_url}"]
        if self.host_header:
            lines.append(f"Adding Host header: {self.host_header}")
        if self.status_code is not None:
            lines.append(f"HTTP Status: {self.status_code}")
        if self.headers:
            lines.append("Response Headers:")
            lines.extend(f"  {key}: {value}" for key, value in self.headers)
        if self.body_preview is not None:
            lines.append(f"Response Body (first {BODY_PREVIEW_CHARS} chars):")
            lines.append(self.body_preview)
        lines.extend(self.notes)
        return "\n".join(lines)
