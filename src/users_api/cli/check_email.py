"""``users-api check-email``: run an address through the email validator."""

import typer
from rich.markup import escape

from ..exceptions import UnprocessableEmailError
from ..validation import validate_email
from . import app
from ._common import console


@app.command("check-email")
def check_email(
    email: str = typer.Argument(..., help="Email address to check"),
) -> None:
    """Check whether EMAIL would be accepted by the user API."""
    try:
        validate_email(email)
    except UnprocessableEmailError as exc:
        console.print(f"[red]Invalid[/red] {escape(repr(email))}: {exc.message}", highlight=False)
        raise typer.Exit(1)
    console.print(f"[green]Valid[/green] {escape(repr(email))}", highlight=False)
