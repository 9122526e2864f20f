# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration model and YAML loader for flagset."""

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".flagset.yaml"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


class MixedSeparators(str, Enum):
    """Whether one item list may combine ``|`` and ``,``."""

    ALLOW = "allow"
    FORBID = "forbid"


class ParserOptions(BaseModel):
    """Options controlling how invocations are parsed."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    mixed_separators: MixedSeparators = Field(alias="mixed-separators", default=MixedSeparators.ALLOW)


class FlagsetConfig(BaseModel):
    """Top-level configuration file model."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    parser: ParserOptions = Field(default_factory=ParserOptions)
    log_level: str | None = Field(alias="log-level", default=None)


def load_config(path: Path) -> FlagsetConfig:
    """Load and validate a configuration file.

    An empty file is treated as the default configuration.

    Args:
        path: Path to the ``.flagset.yaml`` file.

    Returns:
        A validated FlagsetConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return FlagsetConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def find_config(directory: Path) -> Path | None:
    """Return the config file inside *directory*, or None if there is none."""
    candidate = directory / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    return None
