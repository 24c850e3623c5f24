from backdrop_admin.models.auth import LoginTrace
from backdrop_admin.models.content import ContentDetail, ContentItem
from backdrop_admin.models.envelope import ActionResult, ApiErrorBody, Envelope
from backdrop_admin.models.page import Page, page_params
from backdrop_admin.models.people import Comment, User
from backdrop_admin.models.reports import LogEntry, LogSeverity, Requirement, Severity, StatusReport
from backdrop_admin.models.site import Block, CronResult, CronStatus, ManagedFile

__all__ = [
    "ActionResult",
    "ApiErrorBody",
    "Block",
    "Comment",
    "ContentDetail",
    "ContentItem",
    "CronResult",
    "CronStatus",
    "Envelope",
    "LogEntry",
    "LogSeverity",
    "LoginTrace",
    "ManagedFile",
    "Page",
    "Requirement",
    "Severity",
    "StatusReport",
    "User",
    "page_params",
]
