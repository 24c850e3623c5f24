"""
Pagination shared by every list endpoint.

Requests carry `page` (>= 1) and `limit` (1..100); responses carry
`items`, `total`, `page`, `limit` and the derived `pages`.
"""

from __future__ import annotations

import math
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field, model_validator

T = TypeVar("T")

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


def page_count(total: int, limit: int) -> int:
    return math.ceil(total / limit)


def page_params(page: int = 1, limit: int = DEFAULT_LIMIT) -> dict[str, int]:
    """Query parameters for a list call. `limit` is clamped the same way the server clamps it."""
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    return {"page": page, "limit": max(1, min(limit, MAX_LIMIT))}


class Page(BaseModel, Generic[T]):
    items: list[T]
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    limit: int = Field(ge=1, le=MAX_LIMIT)
    pages: Optional[int] = None

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def _check_counts(self) -> "Page[T]":
        expected = page_count(self.total, self.limit)
        if self.pages is None:
            self.pages = expected
        elif self.pages != expected:
            raise ValueError(f"pages={self.pages} does not match ceil({self.total}/{self.limit})={expected}")
        if len(self.items) > self.limit:
            raise ValueError(f"{len(self.items)} items exceed limit {self.limit}")
        return self

    @property
    def has_next(self) -> bool:
        return self.page < (self.pages or 0)

    @property
    def has_previous(self) -> bool:
        return self.page > 1
