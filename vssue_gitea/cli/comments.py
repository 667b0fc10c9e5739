"""CLI commands for page issues and their comments."""

import asyncio

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..vssue.models import VssueComment, VssueComments, VssueIssue
from .adapter import create_adapter
from .options import (
    COMMENT_ID_ARGUMENT,
    CONTENT_ARGUMENT,
    ISSUE_ID_ARGUMENT,
    TOKEN_OPTION,
)

console = Console()


def _print_issue(issue: VssueIssue) -> None:
    console.print(f"#{issue.id} {issue.title}")
    console.print(f"Link: {issue.link}", soft_wrap=True)


def _print_comment(comment: VssueComment) -> None:
    console.print(
        f"💬 Comment {comment.id} by {comment.author.username} "
        f"({comment.updated_at:%Y-%m-%d %H:%M})"
    )
    console.print(comment.content_raw, markup=False, soft_wrap=True)


async def _get_issue(
    access_token: str | None, issue_id: int | None, title: str | None
) -> VssueIssue | None:
    async with create_adapter() as adapter:
        return await adapter.get_issue(
            access_token, issue_id=issue_id, issue_title=title
        )


def issue(
    issue_id: int | None = typer.Option(None, "--id", help="Issue number"),
    title: str | None = typer.Option(
        None, "--title", help="Issue title to search for among labelled issues"
    ),
    access_token: str | None = TOKEN_OPTION,
) -> None:
    """Find the issue of a page by number or title."""
    if issue_id is None and title is None:
        console.print("❌ Error: either --id or --title is required")
        raise typer.Exit(1)

    try:
        found = asyncio.run(_get_issue(access_token, issue_id, title))
    except Exception as e:
        console.print(f"❌ Error: {e}")
        raise typer.Exit(1)

    if found is None:
        console.print("❌ Issue not found")
        raise typer.Exit(1)

    _print_issue(found)


async def _post_issue(access_token: str | None, title: str, content: str) -> VssueIssue:
    async with create_adapter() as adapter:
        return await adapter.post_issue(access_token, title=title, content=content)


def create_issue(
    title: str = typer.Option(..., "--title", help="Issue title"),
    content: str = typer.Option("", "--content", "-c", help="Issue body"),
    access_token: str | None = TOKEN_OPTION,
) -> None:
    """Create the issue of a page."""
    try:
        created = asyncio.run(_post_issue(access_token, title, content))
    except Exception as e:
        console.print(f"❌ Error: {e}")
        raise typer.Exit(1)

    console.print("✅ Created issue")
    _print_issue(created)


async def _get_comments(access_token: str | None, issue_id: int) -> VssueComments:
    async with create_adapter() as adapter:
        return await adapter.get_comments(access_token, issue_id)


def comments(
    issue_id: int = ISSUE_ID_ARGUMENT,
    access_token: str | None = TOKEN_OPTION,
) -> None:
    """List the comments of an issue."""
    try:
        result = asyncio.run(_get_comments(access_token, issue_id))
    except Exception as e:
        console.print(f"❌ Error: {e}")
        raise typer.Exit(1)

    if not result.data:
        console.print("No comments yet")
        return

    table = Table(title=f"Comments on #{issue_id}")
    table.add_column("ID", style="cyan")
    table.add_column("Author", style="green")
    table.add_column("Created", style="yellow")
    table.add_column("Content")
    for comment in result.data:
        table.add_row(
            str(comment.id),
            comment.author.username,
            f"{comment.created_at:%Y-%m-%d %H:%M}",
            escape(comment.content_raw),
        )
    console.print(table)


async def _post_comment(
    access_token: str | None, issue_id: int, content: str
) -> VssueComment:
    async with create_adapter() as adapter:
        return await adapter.post_comment(access_token, issue_id, content)


def comment(
    issue_id: int = ISSUE_ID_ARGUMENT,
    content: str = CONTENT_ARGUMENT,
    access_token: str | None = TOKEN_OPTION,
) -> None:
    """Post a comment on an issue."""
    try:
        created = asyncio.run(_post_comment(access_token, issue_id, content))
    except Exception as e:
        console.print(f"❌ Error: {e}")
        raise typer.Exit(1)

    console.print("✅ Posted comment")
    _print_comment(created)


async def _put_comment(
    access_token: str | None, issue_id: int, comment_id: int, content: str
) -> VssueComment:
    async with create_adapter() as adapter:
        return await adapter.put_comment(access_token, issue_id, comment_id, content)


def edit_comment(
    issue_id: int = ISSUE_ID_ARGUMENT,
    comment_id: int = COMMENT_ID_ARGUMENT,
    content: str = CONTENT_ARGUMENT,
    access_token: str | None = TOKEN_OPTION,
) -> None:
    """Replace the content of a comment."""
    try:
        edited = asyncio.run(_put_comment(access_token, issue_id, comment_id, content))
    except Exception as e:
        console.print(f"❌ Error: {e}")
        raise typer.Exit(1)

    console.print("✅ Edited comment")
    _print_comment(edited)


async def _delete_comment(
    access_token: str | None, issue_id: int, comment_id: int
) -> bool:
    async with create_adapter() as adapter:
        return await adapter.delete_comment(access_token, issue_id, comment_id)


def delete_comment(
    issue_id: int = ISSUE_ID_ARGUMENT,
    comment_id: int = COMMENT_ID_ARGUMENT,
    access_token: str | None = TOKEN_OPTION,
) -> None:
    """Delete a comment."""
    try:
        deleted = asyncio.run(_delete_comment(access_token, issue_id, comment_id))
    except Exception as e:
        console.print(f"❌ Error: {e}")
        raise typer.Exit(1)

    if not deleted:
        console.print(f"❌ Comment {comment_id} was not deleted")
        raise typer.Exit(1)

    console.print(f"🗑️  Deleted comment {comment_id}")


async def _render(access_token: str | None, content: str) -> str:
    async with create_adapter() as adapter:
        return await adapter.get_markdown_content(access_token, content)


def render(
    content: str = CONTENT_ARGUMENT,
    access_token: str | None = TOKEN_OPTION,
) -> None:
    """Render markdown to HTML with Gitea's renderer."""
    try:
        html = asyncio.run(_render(access_token, content))
    except Exception as e:
        console.print(f"❌ Error: {e}")
        raise typer.Exit(1)

    console.print(html, markup=False, soft_wrap=True)
