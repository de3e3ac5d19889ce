"""Configuration loading for the users-api server.

Configuration sources are merged in priority order:
    1. Defaults (defined in ServerConfig)
    2. Global config (~/.users-api.toml)
    3. Project config (./users-api.toml)
    4. Explicit config file
    5. Environment variables (USERS_API_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(port=8080, verbose=True)
    >>> config.port
    8080
    >>> config.verbosity
    'verbose'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

_VERBOSITIES = ("quiet", "normal", "verbose")

ENV_PREFIX = "USERS_API_"


@dataclass(frozen=True)
class ServerConfig:
    """Settings for serving the user API.

    Attributes:
        host: Interface to bind to
        port: TCP port to listen on
        seed: Load the fixture users into the store at startup
        verbosity: Logging verbosity level
        log_file: Optional path that also receives log records
    """

    host: str = "127.0.0.1"
    port: int = 3000
    seed: bool = True
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.host:
            raise InvalidConfigError("host", self.host, "must not be empty")
        if not 1 <= self.port <= 65535:
            raise InvalidConfigError("port", self.port, "must be between 1 and 65535")
        if self.verbosity not in _VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"must be one of {', '.join(_VERBOSITIES)}"
            )

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> ServerConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are skipped so unset CLI options do not mask files.

    Returns:
        Validated ServerConfig instance

    Raises:
        ConfigurationError: If a config file is missing, unreadable or has
            unknown keys
        InvalidConfigError: If a value is out of range
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".users-api.toml"
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global config"))

    project_config = Path.cwd() / "users-api.toml"
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file, "config file"))

    merged.update(_load_env_vars())

    # verbose/quiet flags collapse into verbosity
    verbose = overrides.pop("verbose", False)
    quiet = overrides.pop("quiet", False)
    if verbose:
        overrides["verbosity"] = "verbose"
    elif quiet:
        overrides["verbosity"] = "quiet"

    merged.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return ServerConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _read_config_file(path: Path, label: str) -> dict[str, Any]:
    try:
        return _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from USERS_API_* environment variables.

    Supported environment variables:
        USERS_API_HOST: str
        USERS_API_PORT: int
        USERS_API_SEED: bool (true/false/1/0/yes/no/on/off)
        USERS_API_VERBOSITY: quiet/normal/verbose
        USERS_API_LOG_FILE: str

    Returns:
        Dict of field_name -> parsed_value for any USERS_API_* vars found.
    """
    type_hints = get_type_hints(ServerConfig)

    result: dict[str, Any] = {}

    for field_name in ServerConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
