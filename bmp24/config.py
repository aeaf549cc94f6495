"""Configuration loading from bmp24.toml.

Resolution order: ``BMP24_CONFIG`` environment variable, explicit path,
``./bmp24.toml``, ``~/bmp24.toml``. When nothing is found the built-in
defaults apply.

Example bmp24.toml:

    [bmp24]
    overwrite = true
    log_level = "INFO"
"""

from __future__ import annotations

import os
from typing import Any, Literal, cast

from pydantic import BaseModel, ValidationError

# TOML loading for Python 3.11+ and older
try:
    import tomllib  # type: ignore[import-not-found, unused-ignore]
except ImportError:
    import tomli as tomllib  # type: ignore[import-not-found, no-redef, unused-ignore]

CONFIG_ENV = "BMP24_CONFIG"
CONFIG_FILENAME = "bmp24.toml"


class Bmp24Config(BaseModel):
    """Settings for the file API and command line.

    Attributes:
        overwrite: Whether save_bmp may truncate an existing file
        log_level: Logging level used by the command line entry point
    """

    model_config = {"extra": "forbid"}

    overwrite: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


def _resolve_config_path(config_path: str | None) -> str | None:
    """Resolve configuration path from env, explicit path, or defaults."""
    env_config = os.environ.get(CONFIG_ENV)
    if env_config:
        return env_config
    if config_path:
        return config_path
    candidates = [
        CONFIG_FILENAME,
        os.path.expanduser(os.path.join("~", CONFIG_FILENAME)),
    ]
    for candidate in candidates:
        if os.path.exists(candidate):
            return candidate
    return None


def load_config(config_path: str | None = None) -> Bmp24Config:
    """Load settings, falling back to defaults when no file is present.

    Raises:
        FileNotFoundError: If an explicitly named file does not exist
        ValueError: If the file holds unknown keys or invalid values
    """
    resolved_path = _resolve_config_path(config_path)
    if resolved_path is None:
        return Bmp24Config()
    if not os.path.exists(resolved_path):
        raise FileNotFoundError(
            f"Config file not found at {resolved_path}. Set {CONFIG_ENV} or create {CONFIG_FILENAME}"
        )
    with open(resolved_path, "rb") as f:
        config = cast(dict[str, Any], tomllib.load(f))
    section = config.get("bmp24", {})
    try:
        return Bmp24Config(**section)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {resolved_path}: {e}") from e
