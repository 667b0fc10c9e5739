"""Adapter construction for CLI commands."""

from ..config import GiteaConfig
from ..gitea_client.client import GiteaV1


def create_adapter() -> GiteaV1:
    """Create a Gitea adapter from environment configuration.

    Raises:
        ValueError: If required GITEA_* variables are missing
    """
    return GiteaV1(GiteaConfig().to_options())
