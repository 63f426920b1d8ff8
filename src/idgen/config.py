"""
Configuration management for idgen.

Loads and validates configuration from idgen.toml files and IDGEN_*
environment variables using Pydantic.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from idgen.generators.uuid_generator import SUPPORTED_VERSIONS

CONFIG_FILENAME = "idgen.toml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class OutputConfig(BaseSettings):
    """Output configuration."""

    model_config = SettingsConfigDict(env_prefix="IDGEN_OUTPUT_")

    count: int = Field(default=1, ge=0, description="Identifiers printed per command")


class UuidConfig(BaseSettings):
    """UUID command configuration."""

    model_config = SettingsConfigDict(env_prefix="IDGEN_UUID_")

    version: int = Field(default=4, description="UUID version used when -v is not given")

    @field_validator("version")
    @classmethod
    def check_version(cls, value: int) -> int:
        if value not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported UUID version: {value}. "
                f"Available: {', '.join(str(v) for v in SUPPORTED_VERSIONS)}"
            )
        return value


class LogConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="IDGEN_LOG_")

    level: str = Field(default="WARNING", description="Log level for messages written to stderr")

    @field_validator("level")
    @classmethod
    def check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}. Available: {', '.join(LOG_LEVELS)}")
        return level


class Config(BaseSettings):
    """Main configuration for idgen."""

    model_config = SettingsConfigDict(env_prefix="IDGEN_")

    output: OutputConfig = Field(default_factory=OutputConfig)
    uuid: UuidConfig = Field(default_factory=UuidConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def from_toml(cls, path: Path | str) -> Config:
        """
        Build configuration from an idgen.toml file.

        Each table present in the file ([output], [uuid], [log]) is taken
        as a whole; tables the file leaves out still read their IDGEN_*
        environment variables.

        Raises:
            FileNotFoundError: If path does not exist
            ValueError: If a value fails validation
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        return cls(**data)

    @classmethod
    def find_and_load(cls, start_dir: Optional[Path] = None) -> Config:
        """
        Load the idgen.toml closest to start_dir.

        Args:
            start_dir: First directory checked (defaults to the working directory)

        Raises:
            FileNotFoundError: If neither start_dir nor any ancestor holds idgen.toml
        """
        if start_dir is None:
            start_dir = Path.cwd()

        current = Path(start_dir).resolve()
        for directory in (current, *current.parents):
            config_path = directory / CONFIG_FILENAME
            if config_path.exists():
                return cls.from_toml(config_path)

        raise FileNotFoundError(f"No {CONFIG_FILENAME} in {current} or its parents")

    @classmethod
    def load(cls, path: Optional[Path | str] = None) -> Config:
        """
        Load configuration for the CLI.

        An explicit path must exist. Without one, the nearest idgen.toml is
        used, falling back to defaults and environment variables.
        """
        if path is not None:
            return cls.from_toml(path)
        try:
            return cls.find_and_load()
        except FileNotFoundError:
            return cls()
