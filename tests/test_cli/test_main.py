"""Test main CLI functionality."""

from typer.testing import CliRunner

from vssue_gitea.cli.main import app

runner = CliRunner()


def test_version_command() -> None:
    """Test version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "Vssue Gitea v" in result.output


def test_help_lists_commands() -> None:
    """Test every command is registered."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in (
        "verifier",
        "auth-url",
        "token",
        "user",
        "issue",
        "create-issue",
        "comments",
        "comment",
        "edit-comment",
        "delete-comment",
        "render",
    ):
        assert command in result.output


def test_short_help_option() -> None:
    """Test -h shorthand."""
    result = runner.invoke(app, ["-h"])
    assert result.exit_code == 0
