"""Errors raised by dropscan."""


class DropscanError(Exception):
    """Base class for dropscan errors."""


class ConfigurationError(DropscanError):
    """Raised for invalid configuration or filter values."""


class LoadError(DropscanError):
    """Raised when an input source cannot be read or decoded at all."""
