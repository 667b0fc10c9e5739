"""Standardized CLI option definitions shared by all commands."""

import typer

TOKEN_OPTION = typer.Option(
    None,
    "--token",
    "-t",
    envvar="GITEA_TOKEN",
    help="User access token (defaults to GITEA_TOKEN env var)",
)

ISSUE_ID_ARGUMENT = typer.Argument(..., help="Issue number of the page")

COMMENT_ID_ARGUMENT = typer.Argument(..., help="Comment identifier")

CONTENT_ARGUMENT = typer.Argument(..., help="Content in markdown")

VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Log HTTP requests and adapter activity"
)
