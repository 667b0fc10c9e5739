"""CLI commands for the OAuth authorization flow."""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from ..utils.pkce import generate_pkce_pair
from ..vssue.models import AuthResult, VssueUser
from .adapter import create_adapter
from .options import TOKEN_OPTION

console = Console()


def verifier(
    length: int = typer.Option(
        43, "--length", "-n", help="Verifier length, clamped to 43..128"
    ),
) -> None:
    """Generate a PKCE code verifier and its S256 challenge."""
    codes = generate_pkce_pair(length)

    table = Table(title="PKCE")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("code_verifier", codes.code_verifier)
    table.add_row("code_challenge", codes.code_challenge)
    table.add_row("code_challenge_method", codes.code_challenge_method)
    console.print(table)


async def _redirect_url(redirect_uri: str) -> str:
    async with create_adapter() as adapter:
        return adapter.redirect_auth(redirect_uri)


def auth_url(
    redirect_uri: str = typer.Argument(
        ..., help="URL Gitea redirects back to after authorization"
    ),
) -> None:
    """Print the Gitea authorization page URL."""
    try:
        url = asyncio.run(_redirect_url(redirect_uri))
    except Exception as e:
        console.print(f"❌ Error: {e}")
        raise typer.Exit(1)

    console.print(url, soft_wrap=True)


async def _handle_callback(callback_url: str) -> AuthResult:
    async with create_adapter() as adapter:
        return await adapter.handle_auth(callback_url)


async def _exchange_code(code: str, redirect_uri: str) -> AuthResult:
    async with create_adapter() as adapter:
        access_token = await adapter.get_access_token(
            code=code, redirect_uri=redirect_uri
        )
    return AuthResult(access_token=access_token, clean_url=redirect_uri)


def token(
    callback_url: str | None = typer.Argument(
        None, help="Full URL Gitea redirected to, including code and state"
    ),
    code: str | None = typer.Option(
        None, "--code", help="Authorization code to exchange directly"
    ),
    redirect_uri: str | None = typer.Option(
        None,
        "--redirect-uri",
        help="Redirect URI the code was issued for (required with --code)",
    ),
) -> None:
    """Exchange an authorization code for an access token.

    Pass either the full callback URL, or --code with --redirect-uri.

    Examples:
        vssue-gitea token "https://blog.example.com/post?code=abc&state=Vssue"
        vssue-gitea token --code abc --redirect-uri https://blog.example.com/post
    """
    if code is not None:
        if callback_url is not None:
            console.print("❌ Error: pass either a callback URL or --code, not both")
            raise typer.Exit(1)
        if redirect_uri is None:
            console.print("❌ Error: --code requires --redirect-uri")
            raise typer.Exit(1)
        exchange = _exchange_code(code, redirect_uri)
    elif callback_url is not None:
        exchange = _handle_callback(callback_url)
    else:
        console.print("❌ Error: either a callback URL or --code is required")
        raise typer.Exit(1)

    try:
        result = asyncio.run(exchange)
    except Exception as e:
        console.print(f"❌ Error: {e}")
        raise typer.Exit(1)

    if result.access_token is None:
        console.print("❌ No authorization code with a matching state in URL")
        raise typer.Exit(1)

    console.print("✅ Authorized")
    console.print(f"Access token: {result.access_token}", soft_wrap=True)
    console.print(f"Clean URL: {result.clean_url}", soft_wrap=True)


async def _get_user(access_token: str | None) -> VssueUser:
    async with create_adapter() as adapter:
        return await adapter.get_user(access_token)


def user(access_token: str | None = TOKEN_OPTION) -> None:
    """Show the user an access token belongs to."""
    try:
        current_user = asyncio.run(_get_user(access_token))
    except Exception as e:
        console.print(f"❌ Error: {e}")
        raise typer.Exit(1)

    console.print(f"👤 {current_user.username}")
    console.print(f"Homepage: {current_user.homepage}", soft_wrap=True)
