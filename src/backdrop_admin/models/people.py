"""
User and comment models.
"""

from typing import Optional
from pydantic import BaseModel, Field


class User(BaseModel):
    uid: int
    name: str
    status: bool
    mail: Optional[str] = None
    roles: list[str] = Field(default_factory=list)
    created: Optional[int] = None
    access: Optional[int] = None

    model_config = {"extra": "forbid"}


class Comment(BaseModel):
    cid: int
    nid: int
    subject: str
    status: bool
    author: Optional[str] = None
    node_title: Optional[str] = None
    body: Optional[str] = None
    created: Optional[int] = None

    model_config = {"extra": "forbid"}
