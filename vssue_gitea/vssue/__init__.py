"""Platform-neutral Vssue adapter contract."""

from .api import VssueAPI
from .models import (
    AccessToken,
    AuthResult,
    VssueComment,
    VssueComments,
    VssueIssue,
    VssueOptions,
    VssuePlatform,
    VssuePlatformMeta,
    VssueQuery,
    VssueReactions,
    VssueUser,
)

__all__ = [
    "VssueAPI",
    "AccessToken",
    "AuthResult",
    "VssueComment",
    "VssueComments",
    "VssueIssue",
    "VssueOptions",
    "VssuePlatform",
    "VssuePlatformMeta",
    "VssueQuery",
    "VssueReactions",
    "VssueUser",
]
