"""Tests for Vssue contract models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from vssue_gitea.vssue.models import (
    AuthResult,
    VssueComment,
    VssueOptions,
    VssueQuery,
    VssueReactions,
    VssueUser,
)


class TestVssueUser:
    """Test VssueUser model."""

    def test_missing_fields(self) -> None:
        """Test validation with missing fields."""
        with pytest.raises(ValidationError):
            VssueUser(username="testuser")  # type: ignore[call-arg]


class TestVssueComment:
    """Test VssueComment model."""

    def test_parses_timestamps(self) -> None:
        """Test ISO 8601 strings become datetimes."""
        comment = VssueComment(
            id=1,
            content="<p>hi</p>",
            content_raw="hi",
            author=VssueUser(username="u", homepage="https://a.com/u"),
            created_at="2024-01-01T10:00:00Z",  # type: ignore[arg-type]
            updated_at="2024-01-01T10:00:00Z",  # type: ignore[arg-type]
        )
        assert comment.created_at == datetime(2024, 1, 1, 10, tzinfo=timezone.utc)
        assert comment.reactions is None

    def test_reactions(self) -> None:
        """Test reactions default to zero counts."""
        reactions = VssueReactions(heart=2)
        assert (reactions.like, reactions.unlike, reactions.heart) == (0, 0, 2)


class TestVssueQuery:
    """Test VssueQuery model."""

    def test_defaults(self) -> None:
        """Test default paging."""
        query = VssueQuery()
        assert (query.page, query.per_page, query.sort) == (1, 10, "desc")

    def test_invalid_sort(self) -> None:
        """Test sort accepts only asc or desc."""
        with pytest.raises(ValidationError):
            VssueQuery(sort="random")  # type: ignore[arg-type]


class TestVssueOptions:
    """Test VssueOptions model."""

    def test_defaults(self) -> None:
        """Test default labels and state."""
        options = VssueOptions(owner="o", repo="r", client_id="c")
        assert options.labels == ["Vssue"]
        assert options.state == "Vssue"
        assert options.client_secret is None
        assert options.proxy is None

    def test_proxy_string_or_callable(self) -> None:
        """Test proxy accepts a URL or a function."""
        as_string = VssueOptions(
            owner="o", repo="r", client_id="c", proxy="https://p.example.com"
        )
        assert as_string.proxy == "https://p.example.com"

        as_function = VssueOptions(
            owner="o", repo="r", client_id="c", proxy=lambda url: f"p/{url}"
        )
        assert callable(as_function.proxy)
        assert as_function.proxy("x") == "p/x"  # type: ignore[operator]


class TestAuthResult:
    """Test AuthResult model."""

    def test_empty(self) -> None:
        """Test an empty result carries no token."""
        result = AuthResult()
        assert result.access_token is None
        assert result.clean_url is None
