"""Relay error types."""


class ConfigurationError(Exception):
    """Raised when the relay configuration is missing or invalid"""
    pass
