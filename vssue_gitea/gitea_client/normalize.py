"""Convert Gitea API v1 payloads into Vssue models.

API Reference: https://try.gitea.io/api/swagger
"""

from typing import Any

from ..utils.url import concat_url
from ..vssue.models import VssueComment, VssueIssue, VssueUser


def normalize_user(user: dict[str, Any], base_url: str) -> VssueUser:
    """Convert a Gitea User object."""
    return VssueUser(
        username=user["login"],
        avatar=user.get("avatar_url"),
        homepage=concat_url(base_url, user["login"]),
    )


def normalize_issue(
    issue: dict[str, Any], base_url: str, owner: str, repo: str
) -> VssueIssue:
    """Convert a Gitea Issue object.

    The Vssue issue id is the repository-scoped issue number, not Gitea's
    global issue id.
    """
    return VssueIssue(
        id=issue["number"],
        title=issue["title"],
        content=issue.get("body"),
        link=concat_url(base_url, f"{owner}/{repo}/issues/{issue['number']}"),
    )


def normalize_comment(comment: dict[str, Any], base_url: str) -> VssueComment:
    """Convert a Gitea Comment object.

    ``body_html`` is not part of Gitea's payload; the client fills it in from
    the markdown endpoint before normalizing.
    """
    return VssueComment(
        id=comment["id"],
        content=comment.get("body_html") or comment["body"],
        content_raw=comment["body"],
        author=normalize_user(comment["user"], base_url),
        created_at=comment["created_at"],
        updated_at=comment["updated_at"],
        reactions=comment.get("reactions"),
    )
