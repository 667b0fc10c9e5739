"""Gitea API v1 adapter for Vssue using httpx.

Docs:
    https://docs.gitea.io/en-us/oauth2-provider/
    https://docs.gitea.io/en-us/api-usage
    https://try.gitea.io/api/swagger
"""

import asyncio
import logging
import time
from typing import Any
from urllib.parse import urlsplit

import httpx

from ..utils.url import (
    build_url,
    concat_url,
    get_clean_url,
    parse_query,
    parse_query_pairs,
)
from ..vssue.api import VssueAPI
from ..vssue.models import (
    AccessToken,
    AuthResult,
    ReactionName,
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
from .normalize import normalize_comment, normalize_issue, normalize_user

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://try.gitea.io"


def _timestamp() -> int:
    """Millisecond timestamp appended to GET requests to avoid caching."""
    return int(time.time() * 1000)


class GiteaV1(VssueAPI):
    """Vssue adapter backed by the issues of a Gitea repository."""

    def __init__(
        self,
        options: VssueOptions,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the adapter.

        Args:
            options: Repository, OAuth application and proxy settings.
                ``client_secret`` and ``proxy`` are required, since Gitea
                does not serve CORS headers for every origin.
            transport: Optional httpx transport (for testing)
        """
        if options.client_secret is None or options.proxy is None:
            raise ValueError("clientSecret and proxy is required for Gitea V1")

        self.base_url = options.base_url or DEFAULT_BASE_URL
        self.owner = options.owner
        self.repo = options.repo
        self.labels = options.labels

        self.client_id = options.client_id
        self.client_secret = options.client_secret
        self.state = options.state
        self.proxy = options.proxy

        self.http = httpx.AsyncClient(
            base_url=concat_url(self.base_url, "api/v1"),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "GiteaV1":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.http.aclose()

    @property
    def platform(self) -> VssuePlatform:
        """The platform api info."""
        return VssuePlatform(
            name="Gitea",
            link=self.base_url,
            version="",
            meta=VssuePlatformMeta(reactable=False, sortable=False),
        )

    @property
    def _repo_path(self) -> str:
        return f"repos/{self.owner}/{self.repo}"

    def _api_url(self, path: str) -> str:
        """Route an API path through the proxy when the proxy is a function."""
        if callable(self.proxy):
            return self.proxy(concat_url(self.base_url, f"api/v1/{path}"))
        return path

    def _token_url(self) -> str:
        original_url = concat_url(self.base_url, "login/oauth/access_token")
        if callable(self.proxy):
            return self.proxy(original_url)
        return self.proxy  # type: ignore[return-value]

    @staticmethod
    def _auth_headers(access_token: AccessToken) -> dict[str, str]:
        if not access_token:
            return {}
        return {"Authorization": f"bearer {access_token}"}

    def redirect_auth(self, redirect_uri: str) -> str:
        """Build the URL of Gitea's authorization page.

        Args:
            redirect_uri: URL Gitea redirects back to with ``code`` and ``state``

        Returns:
            Authorization page URL to send the user to
        """
        return build_url(
            concat_url(self.base_url, "login/oauth/authorize"),
            {
                "client_id": self.client_id,
                "redirect_uri": redirect_uri,
                "response_type": "code",
                "state": self.state,
            },
        )

    async def handle_auth(self, current_url: str) -> AuthResult:
        """Handle the OAuth callback.

        If ``code`` and ``state`` are in the query and the state matches,
        remove them from the query and exchange the code for an access token.
        Every other query pair is kept in order, repeated keys included, so the
        cleaned URL matches the redirect URI Gitea authorized.

        Args:
            current_url: The callback URL the user landed on

        Returns:
            AuthResult with the access token and the cleaned URL, or an empty
            result when there is no usable code
        """
        parts = urlsplit(current_url)
        query = parse_query(parts.query)
        code = query.pop("code", None)
        if not code:
            return AuthResult()

        state = query.pop("state", None)
        if state != self.state:
            logger.warning("OAuth state mismatch, ignoring authorization code")
            return AuthResult()

        remaining = [
            (key, value)
            for key, value in parse_query_pairs(parts.query)
            if key not in ("code", "state")
        ]
        clean_url = build_url(get_clean_url(current_url), remaining)
        if parts.fragment:
            clean_url += f"#{parts.fragment}"

        access_token = await self.get_access_token(code=code, redirect_uri=clean_url)
        return AuthResult(access_token=access_token, clean_url=clean_url)

    async def get_access_token(self, code: str, redirect_uri: str) -> str:
        """Get a user access token via ``code``.

        The token endpoint only accepts form-encoded bodies, JSON does not
        work: https://github.com/go-gitea/gitea/issues/6624
        """
        response = await self.http.post(
            self._token_url(),
            data={
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "code": code,
                "grant_type": "authorization_code",
                "redirect_uri": redirect_uri,
            },
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        response.raise_for_status()
        data = response.json()
        if "access_token" not in data:
            raise ValueError(
                f"No access token in response: {data.get('error', 'unknown error')}"
            )
        return data["access_token"]

    async def get_user(self, access_token: AccessToken) -> VssueUser:
        """Get the logged-in user.

        API Reference: https://try.gitea.io/api/swagger#/user/userGetCurrent
        """
        response = await self.http.get(
            self._api_url("user"), headers=self._auth_headers(access_token)
        )
        response.raise_for_status()
        return normalize_user(response.json(), self.base_url)

    async def get_issue(
        self,
        access_token: AccessToken,
        issue_id: int | str | None = None,
        issue_title: str | None = None,
    ) -> VssueIssue | None:
        """Get the issue of a page by issue id, or by title.

        API Reference:
            https://try.gitea.io/api/swagger#/issue/issueGetIssue
            https://try.gitea.io/api/swagger#/issue/issueListIssues

        Returns:
            The issue, or None if it does not exist
        """
        headers = self._auth_headers(access_token)

        if issue_id:
            response = await self.http.get(
                self._api_url(f"{self._repo_path}/issues/{issue_id}"),
                headers=headers,
                params={"timestamp": _timestamp()},
            )
            if response.status_code == 404:
                return None
            response.raise_for_status()
            return normalize_issue(
                response.json(), self.base_url, self.owner, self.repo
            )

        params: dict[str, Any] = {
            "labels": ",".join(self.labels),
            "timestamp": _timestamp(),
        }
        if issue_title is not None:
            params["q"] = issue_title
        response = await self.http.get(
            self._api_url(f"{self._repo_path}/issues"), headers=headers, params=params
        )
        response.raise_for_status()
        issues = response.json()
        if not issues:
            return None
        return normalize_issue(issues[0], self.base_url, self.owner, self.repo)

    async def _get_label_ids(self, access_token: AccessToken) -> list[int]:
        """Resolve the configured label names to repository label ids.

        Names without a matching repository label are skipped.
        """
        if not self.labels:
            return []

        response = await self.http.get(
            self._api_url(f"{self._repo_path}/labels"),
            headers=self._auth_headers(access_token),
        )
        response.raise_for_status()
        ids_by_name = {label["name"]: label["id"] for label in response.json()}

        missing = [name for name in self.labels if name not in ids_by_name]
        if missing:
            logger.info(
                "Labels not found in %s/%s: %s", self.owner, self.repo, missing
            )
        return [ids_by_name[name] for name in self.labels if name in ids_by_name]

    async def post_issue(
        self, access_token: AccessToken, title: str, content: str
    ) -> VssueIssue:
        """Create a new issue.

        API Reference: https://try.gitea.io/api/swagger#/issue/issueCreateIssue
        """
        label_ids = await self._get_label_ids(access_token)
        response = await self.http.post(
            self._api_url(f"{self._repo_path}/issues"),
            json={"title": title, "body": content, "labels": label_ids},
            headers=self._auth_headers(access_token),
        )
        response.raise_for_status()
        return normalize_issue(response.json(), self.base_url, self.owner, self.repo)

    async def _render_comment(
        self, access_token: AccessToken, comment: dict[str, Any]
    ) -> None:
        comment["body_html"] = await self.get_markdown_content(
            access_token=access_token, content_raw=comment["body"]
        )

    async def get_comments(
        self,
        access_token: AccessToken,
        issue_id: int | str,
        query: VssueQuery | None = None,
    ) -> VssueComments:
        """Get comments of an issue.

        Gitea API v1 returns neither rendered markdown nor pagination for
        issue comments. Each comment is rendered with a separate request,
        all of them concurrently, which may hit 429 Too Many Requests on
        busy issues. Every render finishes before the first failure is raised.

        API Reference: https://try.gitea.io/api/swagger#/issue/issueGetComments
        """
        query = query or VssueQuery()
        logger.debug(
            "Fetching comments of issue #%s (page=%s, per_page=%s, sort=%s ignored)",
            issue_id,
            query.page,
            query.per_page,
            query.sort,
        )

        response = await self.http.get(
            self._api_url(f"{self._repo_path}/issues/{issue_id}/comments"),
            headers=self._auth_headers(access_token),
            params={"timestamp": _timestamp()},
        )
        response.raise_for_status()
        comments_raw: list[dict[str, Any]] = response.json()

        results = await asyncio.gather(
            *(self._render_comment(access_token, comment) for comment in comments_raw),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result

        return VssueComments(
            count=0,
            page=0,
            per_page=0,
            data=[normalize_comment(item, self.base_url) for item in comments_raw],
        )

    async def post_comment(
        self, access_token: AccessToken, issue_id: int | str, content: str
    ) -> VssueComment:
        """Create a new comment.

        API Reference: https://try.gitea.io/api/swagger#/issue/issueCreateComment
        """
        response = await self.http.post(
            self._api_url(f"{self._repo_path}/issues/{issue_id}/comments"),
            json={"body": content},
            headers=self._auth_headers(access_token),
        )
        response.raise_for_status()
        comment = response.json()
        await self._render_comment(access_token, comment)
        return normalize_comment(comment, self.base_url)

    async def put_comment(
        self,
        access_token: AccessToken,
        issue_id: int | str,
        comment_id: int | str,
        content: str,
    ) -> VssueComment:
        """Edit a comment.

        API Reference:
            https://try.gitea.io/api/swagger#/issue/issueEditCommentDeprecated
        """
        response = await self.http.patch(
            self._api_url(f"{self._repo_path}/issues/{issue_id}/comments/{comment_id}"),
            json={"body": content},
            headers=self._auth_headers(access_token),
        )
        response.raise_for_status()
        comment = response.json()
        await self._render_comment(access_token, comment)
        return normalize_comment(comment, self.base_url)

    async def delete_comment(
        self, access_token: AccessToken, issue_id: int | str, comment_id: int | str
    ) -> bool:
        """Delete a comment.

        API Reference:
            https://try.gitea.io/api/swagger#/issue/issueDeleteCommentDeprecated

        Returns:
            True if Gitea answered 204 No Content
        """
        response = await self.http.delete(
            self._api_url(f"{self._repo_path}/issues/{issue_id}/comments/{comment_id}"),
            headers=self._auth_headers(access_token),
        )
        response.raise_for_status()
        return response.status_code == 204

    async def get_comment_reactions(
        self, access_token: AccessToken, issue_id: int | str, comment_id: int | str
    ) -> VssueReactions:
        """Not supported by Gitea API v1."""
        raise NotImplementedError("501 Not Implemented")

    async def post_comment_reaction(
        self,
        access_token: AccessToken,
        issue_id: int | str,
        comment_id: int | str,
        reaction: ReactionName,
    ) -> bool:
        """Not supported by Gitea API v1."""
        raise NotImplementedError("501 Not Implemented")

    async def get_markdown_content(
        self, access_token: AccessToken, content_raw: str
    ) -> str:
        """Render markdown as HTML in the context of the repository.

        API Reference: https://try.gitea.io/api/swagger#/miscellaneous/renderMarkdown
        """
        response = await self.http.post(
            self._api_url("markdown"),
            json={
                "Context": f"{self.owner}/{self.repo}",
                "Mode": "gfm",
                "Text": content_raw,
                "Wiki": False,
            },
            headers=self._auth_headers(access_token),
        )
        response.raise_for_status()
        return response.text
