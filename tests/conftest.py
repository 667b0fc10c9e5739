"""Test configuration and fixtures."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from vssue_gitea.gitea_client.client import GiteaV1
from vssue_gitea.vssue.models import VssueOptions

BASE_URL = "https://gitea.example.com"


def proxy(url: str) -> str:
    """Prefix an upstream URL with a CORS proxy."""
    return f"https://cors.example.com/{url}"


@pytest.fixture
def options() -> VssueOptions:
    """Adapter options with a function proxy."""
    return VssueOptions(
        base_url=BASE_URL,
        owner="testowner",
        repo="testrepo",
        labels=["Vssue"],
        client_id="test_client_id",
        client_secret="test_client_secret",
        state="test_state",
        proxy=proxy,
    )


@pytest.fixture
def make_adapter(
    options: VssueOptions,
) -> Callable[..., GiteaV1]:
    """Build an adapter whose requests are answered by ``handler``."""

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        **overrides: Any,
    ) -> GiteaV1:
        adapter_options = options.model_copy(update=overrides)
        return GiteaV1(adapter_options, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def gitea_user() -> dict[str, Any]:
    """Gitea User payload."""
    return {
        "id": 1,
        "login": "testuser",
        "full_name": "Test User",
        "avatar_url": f"{BASE_URL}/avatars/1",
    }


@pytest.fixture
def gitea_issue(gitea_user: dict[str, Any]) -> dict[str, Any]:
    """Gitea Issue payload."""
    return {
        "id": 1001,
        "number": 7,
        "title": "Page title",
        "body": "Comments of page title",
        "user": gitea_user,
        "state": "open",
        "labels": [{"id": 3, "name": "Vssue", "color": "0075ca"}],
    }


@pytest.fixture
def gitea_comment(gitea_user: dict[str, Any]) -> dict[str, Any]:
    """Gitea Comment payload."""
    return {
        "id": 42,
        "body": "**Hello**",
        "user": gitea_user,
        "created_at": "2024-01-01T10:00:00Z",
        "updated_at": "2024-01-02T11:30:00Z",
    }
