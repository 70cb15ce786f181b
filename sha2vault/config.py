"""Configuration for the sha2vault command-line tool.

Loads settings from an optional TOML file with environment variable overrides.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from dataclasses import replace as dc_replace
from pathlib import Path

import structlog

from sha2vault.core_crypto.state import ConfigurationError, Variant

logger = structlog.get_logger()

CONFIG_SECTION = "sha2vault"

LOG_LEVELS = frozenset({"debug", "info", "warning", "error", "critical"})

# Environment variable -> config field
ENV_OVERRIDES = {
    "SHA2VAULT_VARIANT": "default_variant",
    "SHA2VAULT_ENCODING": "encoding",
    "SHA2VAULT_LOG_LEVEL": "log_level",
}


@dataclass(frozen=True)
class Sha2Config:
    """Tool settings."""

    default_variant: Variant = Variant.SHA256
    encoding: str = "utf-8"  # used for --string input
    log_level: str = "warning"


def _validate(raw: dict[str, object]) -> dict[str, object]:
    """Normalize raw values and reject invalid ones."""
    values: dict[str, object] = {}
    for key, value in raw.items():
        if key == "default_variant":
            values[key] = Variant.coerce(value)  # type: ignore[arg-type]
        elif key == "encoding":
            encoding = str(value)
            try:
                "".encode(encoding)
            except LookupError as exc:
                raise ConfigurationError(f"Unknown encoding: {encoding}") from exc
            values[key] = encoding
        elif key == "log_level":
            level = str(value).lower()
            if level not in LOG_LEVELS:
                raise ConfigurationError(f"Unknown log level: {value}")
            values[key] = level
        else:
            logger.warning("config_unknown_key", key=key)
    return values


def load_config(path: Path | None = None) -> Sha2Config:
    """Load configuration from TOML file with env var overrides.

    Args:
        path: Path to a TOML file. Missing files are skipped with a warning.

    Returns:
        Merged configuration.

    Raises:
        ConfigurationError: If a value is invalid or the file is not valid TOML.
    """
    config = Sha2Config()

    if path is not None and not path.exists():
        logger.warning("config_file_missing", path=str(path))
    elif path is not None:
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(f"Invalid config file {path}: {exc}") from exc
        section = data.get(CONFIG_SECTION, {})
        if not isinstance(section, dict):
            raise ConfigurationError(f"[{CONFIG_SECTION}] must be a table")
        config = dc_replace(config, **_validate(section))
        logger.debug("config_loaded", path=str(path))

    env_values = {
        field_name: os.environ[env_key]
        for env_key, field_name in ENV_OVERRIDES.items()
        if env_key in os.environ
    }
    if env_values:
        config = dc_replace(config, **_validate(env_values))

    return config
