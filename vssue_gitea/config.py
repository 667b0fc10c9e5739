"""Configuration for the Gitea adapter."""

import os
from typing import Optional

from .vssue.models import ProxyOption, VssueOptions

PROXY_URL_PLACEHOLDER = "{url}"


def make_proxy(proxy: str) -> ProxyOption:
    """Turn a proxy setting into a proxy option.

    A value containing ``{url}`` becomes a function substituting the upstream
    URL, e.g. ``https://cors-anywhere.example.com/{url}``. Any other value is
    used as-is as the token exchange URL.
    """
    if PROXY_URL_PLACEHOLDER not in proxy:
        return proxy

    def proxy_url(url: str) -> str:
        return proxy.replace(PROXY_URL_PLACEHOLDER, url)

    return proxy_url


class GiteaConfig:
    """Configuration class for the Gitea adapter, read from the environment."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        self.base_url: str = os.getenv("GITEA_BASE_URL", "https://try.gitea.io")
        self.owner: Optional[str] = os.getenv("GITEA_OWNER")
        self.repo: Optional[str] = os.getenv("GITEA_REPO")
        self.labels: list[str] = [
            label.strip()
            for label in os.getenv("GITEA_LABELS", "Vssue").split(",")
            if label.strip()
        ]
        self.client_id: Optional[str] = os.getenv("GITEA_CLIENT_ID")
        self.client_secret: Optional[str] = os.getenv("GITEA_CLIENT_SECRET")
        self.state: str = os.getenv("GITEA_STATE", "Vssue")
        self.proxy: Optional[str] = os.getenv("GITEA_PROXY")

    def is_configured(self) -> bool:
        """Check if all required settings are present."""
        return not self.missing()

    def missing(self) -> list[str]:
        """Names of the required environment variables that are unset."""
        required = {
            "GITEA_OWNER": self.owner,
            "GITEA_REPO": self.repo,
            "GITEA_CLIENT_ID": self.client_id,
            "GITEA_CLIENT_SECRET": self.client_secret,
            "GITEA_PROXY": self.proxy,
        }
        return [name for name, value in required.items() if not value]

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        missing = self.missing()
        if missing:
            raise ValueError(
                f"Environment variables required for Gitea: {', '.join(missing)}"
            )

    def to_options(self) -> VssueOptions:
        """Build adapter options, raising ValueError if settings are missing."""
        self.validate()
        return VssueOptions(
            base_url=self.base_url,
            owner=self.owner,
            repo=self.repo,
            labels=self.labels,
            client_id=self.client_id,
            client_secret=self.client_secret,
            state=self.state,
            proxy=make_proxy(self.proxy or ""),
        )
