"""User configuration.

Configuration is stored in ~/.config/packstack/config.toml. Every setting is
optional; a missing file means defaults.

Example:
    default_platform = "arch"
    output_dir = "~/scripts"
    catalog_path = "~/my-apps.toml"
"""

import tomllib
from pathlib import Path
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from packstack.core.paths import get_config_path
from packstack.models.platform import Platform


class PackstackConfig(BaseModel):
    """Configuration for script generation defaults.

    Attributes:
        default_platform: Platform used when none is given (None = detect).
        output_dir: Directory scripts are written to (None = current directory).
        catalog_path: Curated catalog TOML file (None = bundled catalog).
    """

    model_config = ConfigDict(extra="forbid")

    default_platform: Annotated[
        Platform | None,
        Field(description="Target platform when none is given"),
    ] = None
    output_dir: Annotated[
        Path | None,
        Field(description="Directory generated scripts are written to"),
    ] = None
    catalog_path: Annotated[
        Path | None,
        Field(description="Curated catalog file (None = bundled)"),
    ] = None

    @field_validator("output_dir", "catalog_path")
    @classmethod
    def expand_user(cls, v: Path | None) -> Path | None:
        """Expand '~' in configured paths."""
        return v.expanduser() if v is not None else None


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> PackstackConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated PackstackConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
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
        return PackstackConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> PackstackConfig:
    """Load configuration, falling back to defaults if the file is missing.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        return PackstackConfig()


def save_config(config: PackstackConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    Unset values are omitted, since TOML has no null.

    Args:
        config: Configuration to save.
        path: Destination. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    data: dict[str, Any] = {}
    if config.default_platform is not None:
        data["default_platform"] = config.default_platform.value
    if config.output_dir is not None:
        data["output_dir"] = str(config.output_dir)
    if config.catalog_path is not None:
        data["catalog_path"] = str(config.catalog_path)

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "wb") as f:
            tomli_w.dump(data, f)
    except OSError as e:
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
