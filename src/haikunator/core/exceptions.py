"""Custom exceptions for Haikunator."""


class HaikunatorError(Exception):
    """Base exception for Haikunator."""

    pass


class ConfigError(HaikunatorError):
    """Configuration could not be loaded or validated."""

    pass


class InvalidTokenLengthError(ConfigError):
    """Token length is negative or not an integer."""

    pass
