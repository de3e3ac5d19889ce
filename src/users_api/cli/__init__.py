"""CLI entry point: registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="users-api",
    help="users-api - In-memory CRUD service for user records",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"users-api {__version__}")
        raise typer.Exit()


@app.callback()
def _root(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """In-memory CRUD service for user records."""


# Import subcommands to register them
from .serve import serve as _serve  # noqa: F401, E402
from .check_email import check_email as _check_email  # noqa: F401, E402


def main() -> None:
    app()
