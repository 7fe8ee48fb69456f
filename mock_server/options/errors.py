"""Errors raised while turning command-line arguments into settings."""


class OptionsError(ValueError):
    """Base class for every command-line options failure."""


class MalformedArguments(OptionsError):
    """Raised when the argument list does not fit the flag schema."""


class InvalidConfiguration(OptionsError):
    """Raised when parsed flags break a cross-flag rule or fail coercion."""
