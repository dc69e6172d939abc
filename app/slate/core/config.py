"""User configuration for slate.

This module provides the configuration model and I/O functions for
slate's persistent settings: the default vault, the extension to match,
and the log level.

Configuration is stored in ~/.config/slate/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from slate.core.paths import get_config_path

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

# Environment variable overriding the configured log level
LOG_ENV_VAR = "SLATE_LOG"


class SlateConfig(BaseModel):
    """Persistent slate settings.

    Attributes:
        vault_path: Default vault location relative to the home directory.
        extension: File extension to match, without leading dot.
        log_level: Minimum level for log output.
    """

    model_config = ConfigDict(extra="forbid")

    vault_path: Annotated[
        str | None,
        Field(description="Default vault, relative to the home directory"),
    ] = None
    extension: Annotated[
        str,
        Field(description="File extension to match (without leading dot)"),
    ] = "md"
    log_level: Annotated[
        LogLevel,
        Field(description="Minimum log level"),
    ] = "WARNING"

    @field_validator("extension", mode="before")
    @classmethod
    def validate_extension(cls, v: object) -> str:
        """Normalize the extension and reject unusable values."""
        if not isinstance(v, str):
            msg = "extension must be a string"
            raise ValueError(msg)
        extension = v.strip().lstrip(".")
        if not extension:
            msg = "extension cannot be empty"
            raise ValueError(msg)
        if "/" in extension or "\\" in extension:
            msg = f"extension cannot contain path separators: '{v}'"
            raise ValueError(msg)
        return extension

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def effective_log_level(self) -> str:
        """Get the log level after applying the SLATE_LOG override.

        Invalid override values are ignored.
        """
        override = os.environ.get(LOG_ENV_VAR, "").strip().upper()
        if override in ("DEBUG", "INFO", "WARNING", "ERROR"):
            return override
        return self.log_level


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid TOML."""


def load_config(path: Path | None = None) -> SlateConfig:
    """Load configuration from a TOML file.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated SlateConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return SlateConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return SlateConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def save_config(config: SlateConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The SlateConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    from tempfile import NamedTemporaryFile

    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(_config_to_dict(config), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: SlateConfig) -> dict[str, object]:
    """Convert SlateConfig to a dictionary for TOML serialization.

    TOML has no null, so unset values are omitted.
    """
    return config.model_dump(exclude_none=True)
