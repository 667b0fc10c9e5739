"""Pydantic models for the Vssue adapter contract.

These are the platform-neutral shapes every forge adapter returns, whatever
the forge's own REST API looks like.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

AccessToken = str | None

ProxyOption = str | Callable[[str], str]

ReactionName = Literal["like", "unlike", "heart"]


class VssueUser(BaseModel):
    """A forge user account as shown next to a comment."""

    username: str = Field(..., description="Login name on the forge")
    avatar: str | None = Field(None, description="Avatar image URL")
    homepage: str = Field(..., description="Profile page URL on the forge")


class VssueIssue(BaseModel):
    """The issue backing the comments of one page."""

    id: int = Field(..., description="Issue number within the repository")
    title: str = Field(..., description="Issue title (usually the page title)")
    content: str | None = Field(None, description="Issue body in markdown")
    link: str = Field(..., description="Web URL of the issue")


class VssueReactions(BaseModel):
    """Reaction counts of a comment."""

    like: int = Field(0, description="Number of thumbs-up reactions")
    unlike: int = Field(0, description="Number of thumbs-down reactions")
    heart: int = Field(0, description="Number of heart reactions")


class VssueComment(BaseModel):
    """A single comment on the page issue."""

    id: int = Field(..., description="Unique comment identifier")
    content: str = Field(..., description="Comment content ready to display")
    content_raw: str = Field(..., description="Comment source in markdown")
    author: VssueUser = Field(..., description="Comment author")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
    reactions: VssueReactions | None = Field(
        None, description="Reaction counts, when the platform provides them"
    )


class VssueComments(BaseModel):
    """One page of comments."""

    count: int = Field(..., description="Total number of comments")
    page: int = Field(..., description="Current page number")
    per_page: int = Field(..., description="Comments per page")
    data: list[VssueComment] = Field(
        default_factory=list, description="Comments on this page"
    )


class VssueQuery(BaseModel):
    """Paging and ordering of a comment listing."""

    page: int = Field(1, description="Page number, starting at 1")
    per_page: int = Field(10, description="Comments per page")
    sort: Literal["asc", "desc"] = Field("desc", description="Order by creation")


class VssuePlatformMeta(BaseModel):
    """Capabilities of a platform."""

    reactable: bool = Field(..., description="Whether comments accept reactions")
    sortable: bool = Field(..., description="Whether comments can be sorted")


class VssuePlatform(BaseModel):
    """Information about the forge an adapter talks to."""

    name: str = Field(..., description="Display name of the platform")
    link: str = Field(..., description="Base URL of the platform")
    version: str = Field(..., description="API version label")
    meta: VssuePlatformMeta


class VssueOptions(BaseModel):
    """Options an adapter is constructed from."""

    base_url: str | None = Field(None, description="Forge base URL")
    owner: str = Field(..., description="Repository owner")
    repo: str = Field(..., description="Repository name")
    labels: list[str] = Field(
        default_factory=lambda: ["Vssue"], description="Labels of page issues"
    )
    client_id: str = Field(..., description="OAuth application client id")
    client_secret: str | None = Field(
        None, description="OAuth application client secret"
    )
    state: str = Field("Vssue", description="OAuth state checked on callback")
    proxy: ProxyOption | None = Field(
        None,
        description=(
            "CORS proxy: a URL used for the token exchange, or a function "
            "mapping an upstream URL to its proxied URL"
        ),
    )


class AuthResult(BaseModel):
    """Outcome of handling an OAuth callback URL."""

    access_token: AccessToken = Field(
        None, description="Access token, or None when no valid code was found"
    )
    clean_url: str | None = Field(
        None, description="Callback URL with 'code' and 'state' removed"
    )
