"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import ServerConfig, load_config

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    host: Optional[str] = None,
    port: Optional[int] = None,
    no_seed: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[str] = None,
) -> ServerConfig:
    """Build server configuration from CLI options."""
    overrides = {}
    if host is not None:
        overrides["host"] = host
    if port is not None:
        overrides["port"] = port
    if no_seed:
        overrides["seed"] = False
    if log_file is not None:
        overrides["log_file"] = log_file
    return load_config(config_file=config, verbose=verbose, quiet=quiet, **overrides)
