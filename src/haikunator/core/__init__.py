"""Core components: name generator, settings and word lists."""

from .exceptions import ConfigError, HaikunatorError, InvalidTokenLengthError
from .models import HEX_CHARS, HaikunatorParams, RandomSource
from .name_generator import Haikunator, get_haikunator, haikunate
from .settings import GeneratorSettings, load_config, load_settings
from .words import DEFAULT_ADJECTIVES, DEFAULT_NOUNS

__all__ = [
    # Generator
    "Haikunator",
    "get_haikunator",
    "haikunate",
    # Models
    "HaikunatorParams",
    "RandomSource",
    "HEX_CHARS",
    # Settings
    "GeneratorSettings",
    "load_config",
    "load_settings",
    # Word lists
    "DEFAULT_ADJECTIVES",
    "DEFAULT_NOUNS",
    # Exceptions
    "HaikunatorError",
    "ConfigError",
    "InvalidTokenLengthError",
]
