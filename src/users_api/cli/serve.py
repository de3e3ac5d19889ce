"""``users-api serve``: run the HTTP API."""

import logging
from pathlib import Path
from typing import Optional

import typer

from ..exceptions import UsersApiError
from ..logging_config import setup_logging
from ..seed import DEFAULT_USERS
from ..store import UserStore
from . import app
from ._common import console, resolve_config

logger = logging.getLogger(__name__)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Host to bind to [default: 127.0.0.1]"),
    port: Optional[int] = typer.Option(None, help="Port to listen on [default: 3000]"),
    no_seed: bool = typer.Option(False, "--no-seed", help="Start with an empty store"),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Config file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only log errors"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs here"),
) -> None:
    """Serve the user API until interrupted."""
    # Check dependencies
    try:
        from ..server import _check_deps

        _check_deps()
    except ImportError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    import uvicorn

    from ..server.app import create_app

    try:
        settings = resolve_config(
            config=config,
            host=host,
            port=port,
            no_seed=no_seed,
            verbose=verbose,
            quiet=quiet,
            log_file=log_file,
        )
    except UsersApiError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1)

    setup_logging(
        verbose=settings.verbosity == "verbose",
        quiet=settings.verbosity == "quiet",
        log_file=settings.log_file,
    )

    store = UserStore(DEFAULT_USERS if settings.seed else ())
    logger.info("Loaded %d user(s), serving on %s", len(store), settings.url)

    console.print(f"[bold]users-api[/bold] → [link={settings.url}]{settings.url}[/link]")
    console.print("[dim]Press Ctrl+C to stop[/dim]")

    asgi_app = create_app(store)
    try:
        uvicorn.run(
            asgi_app,
            host=settings.host,
            port=settings.port,
            log_level="info" if settings.verbosity == "verbose" else "warning",
        )
    except KeyboardInterrupt:
        pass
    finally:
        console.print("\n[dim]Stopped.[/dim]")
