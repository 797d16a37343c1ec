"""Configuration loading for Haikunator (YAML file + environment)."""

import logging
import os
import random
from pathlib import Path
from typing import Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigError
from .models import (
    DEFAULT_DELIMITER,
    DEFAULT_TOKEN_CHARS,
    DEFAULT_TOKEN_LENGTH,
    HaikunatorParams,
)
from .words import DEFAULT_ADJECTIVES, DEFAULT_NOUNS

logger = logging.getLogger(__name__)

# Searched in order when no config path is given
CONFIG_LOCATIONS = [
    Path.home() / ".haikunator" / "config.yaml",
    Path("haikunator.yaml"),
]

# Environment variable -> settings field
ENV_VARS = {
    "HAIKUNATOR_DELIMITER": "delimiter",
    "HAIKUNATOR_TOKEN_LENGTH": "token_length",
    "HAIKUNATOR_TOKEN_HEX": "token_hex",
    "HAIKUNATOR_TOKEN_CHARS": "token_chars",
    "HAIKUNATOR_SEED": "seed",
}


class GeneratorSettings(BaseModel):
    """Validated generator settings."""

    model_config = ConfigDict(extra="forbid")

    delimiter: str = DEFAULT_DELIMITER
    token_length: int = Field(default=DEFAULT_TOKEN_LENGTH, ge=0)
    token_hex: bool = False
    token_chars: str = DEFAULT_TOKEN_CHARS
    seed: Optional[int] = None
    # None means the bundled word list
    adjectives: Optional[list[str]] = None
    nouns: Optional[list[str]] = None

    @field_validator("token_length", mode="before")
    @classmethod
    def reject_bool_length(cls, value):
        if isinstance(value, bool):
            raise ValueError("token_length must be an integer, not a boolean")
        return value

    def to_params(self) -> HaikunatorParams:
        """Build HaikunatorParams, seeding the random source if a seed is set."""
        return HaikunatorParams(
            adjectives=DEFAULT_ADJECTIVES if self.adjectives is None else tuple(self.adjectives),
            nouns=DEFAULT_NOUNS if self.nouns is None else tuple(self.nouns),
            delimiter=self.delimiter,
            token_length=self.token_length,
            token_hex=self.token_hex,
            token_chars=self.token_chars,
            rng=random.Random(self.seed) if self.seed is not None else random.Random(),
        )


def find_config_file() -> Optional[Path]:
    """Return the first existing default config file, if any."""
    for loc in CONFIG_LOCATIONS:
        if loc.exists():
            return loc
    return None


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration from a YAML file.

    Args:
        config_path: Explicit config file. If None, CONFIG_LOCATIONS are searched.

    Returns:
        Parsed configuration dictionary ({} if no file was found)

    Raises:
        ConfigError: If an explicit path does not exist or the YAML is invalid
    """
    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            logger.info("No config file found, using defaults")
            return {}
    else:
        config_path = Path(config_path).expanduser()
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_path}")

    logger.info(f"Loaded config from {config_path}")
    return data


def load_settings(
    config: Optional[dict] = None,
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[dict] = None,
) -> GeneratorSettings:
    """Build generator settings from config and environment.

    Precedence: overrides > environment variables > ``generator`` section
    of the config > defaults.

    Args:
        config: Configuration dictionary as returned by load_config
        environ: Environment to read (default: os.environ)
        overrides: Explicit values, e.g. from command-line flags

    Returns:
        Validated GeneratorSettings

    Raises:
        ConfigError: If the merged values fail validation
    """
    if environ is None:
        environ = os.environ

    section = (config or {}).get("generator") or {}
    if not isinstance(section, dict):
        raise ConfigError("'generator' config section must be a mapping")

    values = dict(section)
    for env_name, field_name in ENV_VARS.items():
        if env_name in environ:
            values[field_name] = environ[env_name]
            logger.debug(f"Using {env_name} for {field_name}")
    values.update(overrides or {})

    try:
        return GeneratorSettings.model_validate(values)
    except ValidationError as e:
        raise ConfigError(f"Invalid generator settings: {e}") from e
