"""Gitea client package for API interaction."""

from .client import GiteaV1
from .normalize import normalize_comment, normalize_issue, normalize_user

__all__ = [
    "GiteaV1",
    "normalize_user",
    "normalize_issue",
    "normalize_comment",
]
