"""Main CLI entry point."""

import logging
import sys

import typer
from dotenv import load_dotenv
from rich.console import Console

from . import auth, comments
from .options import VERBOSE_OPTION

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="vssue-gitea",
    help="Gitea issue comments for Vssue",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


@app.callback()
def main(verbose: bool = VERBOSE_OPTION) -> None:
    """Gitea issue comments for Vssue."""
    setup_logging(verbose)


app.command(name="verifier")(auth.verifier)
app.command(name="auth-url")(auth.auth_url)
app.command(name="token")(auth.token)
app.command(name="user")(auth.user)
app.command(name="issue")(comments.issue)
app.command(name="create-issue")(comments.create_issue)
app.command(name="comments")(comments.comments)
app.command(name="comment")(comments.comment)
app.command(name="edit-comment")(comments.edit_comment)
app.command(name="delete-comment")(comments.delete_comment)
app.command(name="render")(comments.render)


@app.command()
def version() -> None:
    """Show version information."""
    from vssue_gitea import __version__

    console.print(f"Vssue Gitea v{__version__}")


if __name__ == "__main__":
    app()
