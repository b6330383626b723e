"""Exceptions raised by herocombiner."""


class HeroCombinerError(Exception):
    """Base class for all herocombiner errors."""


class InvalidInputError(HeroCombinerError):
    """Raised when a combination run is requested with unusable input."""


class ConfigError(HeroCombinerError):
    """Raised when a config key or value is rejected."""
