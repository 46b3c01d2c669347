"""
Application Errors

Exception types shared across the RapidBlood packages.
"""


class RapidBloodError(Exception):
    """Base class for RapidBlood errors."""


class MalformedSessionData(RapidBloodError, ValueError):
    """The durable slot holds content that is not a valid serialized session."""


class ConfigurationError(RapidBloodError, RuntimeError):
    """The session provider was used outside the scope that installs it."""
