"""Gitea adapter for the Vssue comment widget."""

__version__ = "0.1.0"
