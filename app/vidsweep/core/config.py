"""User configuration for vidsweep.

Settings are read from ~/.config/vidsweep/config.toml. A missing file
means defaults; every field is optional.

Example:
    [scan]
    workers = 10
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from vidsweep.core.paths import get_config_path
from vidsweep.library.scanner import DEFAULT_WORKERS


class ScanSettings(BaseModel):
    """Settings for the library scan.

    Attributes:
        workers: Worker threads per library root (0-256).
    """

    model_config = ConfigDict(extra="forbid")

    workers: Annotated[
        int,
        Field(ge=0, le=256, description="Worker threads per library root"),
    ] = DEFAULT_WORKERS


class SweepConfig(BaseModel):
    """Top-level vidsweep configuration."""

    model_config = ConfigDict(extra="forbid")

    scan: ScanSettings = Field(default_factory=ScanSettings)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid TOML."""


def load_config(path: Path | None = None) -> SweepConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated SweepConfig. Defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or violates the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return SweepConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return SweepConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: SweepConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written to a temporary file in the same directory and
    then moved into place with os.replace().

    Args:
        config: The configuration to save.
        path: Target path. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
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
            tomli_w.dump(config_to_dict(config), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: SweepConfig) -> dict[str, object]:
    """Convert a SweepConfig to a dictionary for TOML serialization."""
    return config.model_dump(mode="json")


def dump_config(config: SweepConfig) -> str:
    """Render a SweepConfig as TOML text."""
    return tomli_w.dumps(config_to_dict(config))
