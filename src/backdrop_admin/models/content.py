"""
Content (node) models.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field


class ContentItem(BaseModel):
    nid: int
    title: str
    type: str
    status: bool
    author: Optional[str] = None
    created: Optional[int] = None
    changed: Optional[int] = None

    model_config = {"extra": "forbid"}


class ContentDetail(ContentItem):
    body: Optional[str] = None
    langcode: Optional[str] = None
    promote: Optional[bool] = None
    sticky: Optional[bool] = None
    fields: dict[str, Any] = Field(default_factory=dict)
