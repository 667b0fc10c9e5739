"""Abstract interface implemented by every Vssue forge adapter."""

from abc import ABC, abstractmethod

from .models import (
    AccessToken,
    AuthResult,
    ReactionName,
    VssueComment,
    VssueComments,
    VssueIssue,
    VssuePlatform,
    VssueQuery,
    VssueReactions,
    VssueUser,
)


class VssueAPI(ABC):
    """Abstract base class for forge adapters.

    Adapters translate one forge's REST API into the Vssue models, so the
    comment widget can treat every platform the same way.
    """

    @property
    @abstractmethod
    def platform(self) -> VssuePlatform:
        """Information about the forge."""
        ...

    @abstractmethod
    def redirect_auth(self, redirect_uri: str) -> str:
        """Build the URL of the platform's authorization page.

        Args:
            redirect_uri: URL the platform sends the user back to.
        """
        ...

    @abstractmethod
    async def handle_auth(self, current_url: str) -> AuthResult:
        """Exchange the authorization code found in a callback URL."""
        ...

    @abstractmethod
    async def get_access_token(self, code: str, redirect_uri: str) -> str:
        """Get a user access token for an authorization code."""
        ...

    @abstractmethod
    async def get_user(self, access_token: AccessToken) -> VssueUser:
        """Get the user the access token belongs to."""
        ...

    @abstractmethod
    async def get_issue(
        self,
        access_token: AccessToken,
        issue_id: int | str | None = None,
        issue_title: str | None = None,
    ) -> VssueIssue | None:
        """Get the page issue by id, or by title when no id is given."""
        ...

    @abstractmethod
    async def post_issue(
        self, access_token: AccessToken, title: str, content: str
    ) -> VssueIssue:
        """Create the page issue."""
        ...

    @abstractmethod
    async def get_comments(
        self,
        access_token: AccessToken,
        issue_id: int | str,
        query: VssueQuery | None = None,
    ) -> VssueComments:
        """Get the comments of an issue."""
        ...

    @abstractmethod
    async def post_comment(
        self, access_token: AccessToken, issue_id: int | str, content: str
    ) -> VssueComment:
        """Create a comment."""
        ...

    @abstractmethod
    async def put_comment(
        self,
        access_token: AccessToken,
        issue_id: int | str,
        comment_id: int | str,
        content: str,
    ) -> VssueComment:
        """Edit a comment."""
        ...

    @abstractmethod
    async def delete_comment(
        self, access_token: AccessToken, issue_id: int | str, comment_id: int | str
    ) -> bool:
        """Delete a comment. Returns True on success."""
        ...

    @abstractmethod
    async def get_comment_reactions(
        self, access_token: AccessToken, issue_id: int | str, comment_id: int | str
    ) -> VssueReactions:
        """Get the reactions of a comment."""
        ...

    @abstractmethod
    async def post_comment_reaction(
        self,
        access_token: AccessToken,
        issue_id: int | str,
        comment_id: int | str,
        reaction: ReactionName,
    ) -> bool:
        """Add a reaction to a comment. Returns False if already given."""
        ...

    @abstractmethod
    async def get_markdown_content(
        self, access_token: AccessToken, content_raw: str
    ) -> str:
        """Render markdown to HTML on the platform."""
        ...
