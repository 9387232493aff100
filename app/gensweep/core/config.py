"""Configuration file I/O.

This module provides the settings model and functions for loading and
saving the gensweep configuration in TOML format.

Configuration is stored in ~/.config/gensweep/config.toml
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from gensweep.core.paths import ensure_config_dir, get_config_dir, get_config_path


class SweepConfig(BaseModel):
    """Settings applied to every sweep.

    Attributes:
        exclude: Root-relative glob patterns that are never tracked.
        dry_run: Report deletions without performing them by default.
        confirm: Ask before deleting when running interactively.
    """

    model_config = ConfigDict(extra="forbid")

    exclude: Annotated[
        list[str],
        Field(default_factory=list, description="Glob patterns never tracked"),
    ]
    dry_run: Annotated[bool, Field(description="Default to dry-run sweeps")] = False
    confirm: Annotated[bool, Field(description="Ask before deleting")] = True

    @field_validator("exclude")
    @classmethod
    def validate_patterns(cls, v: list[str]) -> list[str]:
        """Reject empty and absolute exclude patterns."""
        for pattern in v:
            if not pattern.strip():
                msg = "exclude patterns cannot be empty"
                raise ValueError(msg)
            if pattern.startswith("/"):
                msg = f"exclude patterns must be relative to the root: {pattern}"
                raise ValueError(msg)
        return v


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when config content is invalid."""


def load_config(path: Path | None = None) -> SweepConfig:
    """Load and validate configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses default config path.

    Returns:
        Validated SweepConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return SweepConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> SweepConfig:
    """Load configuration, falling back to defaults when no file exists.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        return SweepConfig()


def save_config(config: SweepConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically through a temporary file in the same
    directory and os.replace(). The temporary file is cleaned up on failure.

    Args:
        config: The SweepConfig object to save.
        path: Path to save to. If None, uses default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    try:
        if config_path.parent == get_config_dir():
            ensure_config_dir()
        else:
            config_path.parent.mkdir(parents=True, exist_ok=True)
    except (OSError, RuntimeError) as e:
        raise ConfigError(f"Failed to create config directory: {e}") from e

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def require_config(config_path: Path | None = None) -> SweepConfig:
    """Load configuration or exit with a helpful error message.

    A missing file is not an error; defaults are returned instead.

    Args:
        config_path: Optional custom config path.

    Returns:
        Loaded and validated SweepConfig.

    Raises:
        typer.Exit: If the config file exists but cannot be loaded.
    """
    import typer

    from gensweep.utils.formatting import print_error, print_info

    path = config_path or get_config_path()
    try:
        return load_config_or_default(path)
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        print_info(f"Fix or remove {path}, or run 'gensweep config init --force'.")
        raise typer.Exit(code=1) from e
