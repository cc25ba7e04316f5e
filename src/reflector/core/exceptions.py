"""Custom exceptions for Cluster Reflector."""


class ReflectorError(Exception):
    """Base exception for all Cluster Reflector errors."""


class ConfigurationError(ReflectorError):
    """Configuration-related errors."""
