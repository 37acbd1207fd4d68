"""Demo command: drive an Auth object with the password delegate."""

from __future__ import annotations

from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape

from authdelegate import create_auth
from authdelegate.auth.types import is_error
from authdelegate.contrib.auth_log import attach_auth_log
from authdelegate.contrib.password import password_delegate

app = typer.Typer(help="Log in and out through a password-prompt delegate")
console = Console()


def _prompt(message: str) -> str:
    return typer.prompt(message, hide_input=True)


@app.callback(invoke_without_command=True)
def demo(
    ctx: typer.Context,
    password: str = typer.Option("password", help="Password the delegate accepts"),
    credentials: Optional[str] = typer.Option(None, help="Start out authenticated with these credentials"),
    toggles: int = typer.Option(2, min=1, help="How many times to toggle between logged in and out"),
) -> None:
    """Toggle login/logout the way an auth button would, logging every event."""
    if ctx.invoked_subcommand is not None:
        return

    auth = create_auth(delegate=password_delegate(password, _prompt))
    auth_log = attach_auth_log(auth, sink=lambda message: console.print(f"[dim]auth:[/dim] {escape(message)}"))
    if credentials:
        auth.authenticate(credentials)

    failed = False

    def on_login(status: Any) -> None:
        nonlocal failed
        if is_error(status):
            failed = True
            return
        auth_log("Logged in via demo")

    def on_logout(_status: Any) -> None:
        auth_log("Logged out via demo")

    for _ in range(toggles):
        if auth.is_authenticated():
            auth.logout(on_logout)
        else:
            auth.login(on_login)
        if failed:
            console.print("[red]Authentication failed.[/red]")
            raise typer.Exit(1)

    state = "[green]Authenticated[/green]" if auth.is_authenticated() else "[yellow]Not authenticated[/yellow]"
    console.print(state)
