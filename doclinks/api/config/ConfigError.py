"""Configuration error type."""


class ConfigError(ValueError):
    """Raised when a configuration cannot be located or used."""
