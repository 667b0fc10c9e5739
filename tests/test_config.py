"""Tests for environment configuration."""

import os
from unittest.mock import patch

import pytest

from vssue_gitea.config import GiteaConfig, make_proxy

FULL_ENV = {
    "GITEA_BASE_URL": "https://gitea.example.com",
    "GITEA_OWNER": "testowner",
    "GITEA_REPO": "testrepo",
    "GITEA_LABELS": "Vssue, comments ,",
    "GITEA_CLIENT_ID": "cid",
    "GITEA_CLIENT_SECRET": "secret",
    "GITEA_STATE": "st",
    "GITEA_PROXY": "https://cors.example.com/{url}",
}


class TestMakeProxy:
    """Test make_proxy function."""

    def test_plain_url(self) -> None:
        """Test a URL without placeholder stays a string."""
        assert make_proxy("https://proxy.example.com/token") == (
            "https://proxy.example.com/token"
        )

    def test_template(self) -> None:
        """Test a template becomes a function."""
        proxy = make_proxy("https://cors.example.com/{url}")
        assert callable(proxy)
        assert proxy("https://g.example/api") == (  # type: ignore[operator]
            "https://cors.example.com/https://g.example/api"
        )


class TestGiteaConfig:
    """Test GiteaConfig class."""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self) -> None:
        """Test defaults without environment."""
        config = GiteaConfig()

        assert config.base_url == "https://try.gitea.io"
        assert config.labels == ["Vssue"]
        assert config.state == "Vssue"
        assert not config.is_configured()

    @patch.dict(os.environ, {}, clear=True)
    def test_validate_lists_missing(self) -> None:
        """Test validation names every missing variable."""
        with pytest.raises(ValueError) as exc_info:
            GiteaConfig().validate()

        message = str(exc_info.value)
        for name in (
            "GITEA_OWNER",
            "GITEA_REPO",
            "GITEA_CLIENT_ID",
            "GITEA_CLIENT_SECRET",
            "GITEA_PROXY",
        ):
            assert name in message

    @patch.dict(os.environ, FULL_ENV, clear=True)
    def test_to_options(self) -> None:
        """Test options built from a complete environment."""
        config = GiteaConfig()
        assert config.is_configured()

        options = config.to_options()

        assert options.base_url == "https://gitea.example.com"
        assert options.owner == "testowner"
        assert options.repo == "testrepo"
        assert options.labels == ["Vssue", "comments"]
        assert options.client_id == "cid"
        assert options.client_secret == "secret"
        assert options.state == "st"
        assert callable(options.proxy)

    @patch.dict(
        os.environ,
        {**FULL_ENV, "GITEA_PROXY": "https://proxy.example.com/token"},
        clear=True,
    )
    def test_to_options_string_proxy(self) -> None:
        """Test a plain proxy URL is passed as string."""
        assert GiteaConfig().to_options().proxy == "https://proxy.example.com/token"
