"""Haikunator - heroku-like random names such as "flying-bat-4821"."""

from .core import (
    DEFAULT_ADJECTIVES,
    DEFAULT_NOUNS,
    ConfigError,
    Haikunator,
    HaikunatorError,
    HaikunatorParams,
    InvalidTokenLengthError,
    haikunate,
)

__version__ = "0.1.0"

__all__ = [
    "Haikunator",
    "HaikunatorParams",
    "haikunate",
    "DEFAULT_ADJECTIVES",
    "DEFAULT_NOUNS",
    "HaikunatorError",
    "ConfigError",
    "InvalidTokenLengthError",
]
