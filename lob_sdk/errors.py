"""Exception hierarchy for the lob_sdk primitives.

Every error raised on purpose by this package derives from ``LobSdkError``.
Each concrete error also derives from the closest built-in exception so
callers can catch either the specific SDK type or the familiar Python one.
"""


class LobSdkError(Exception):
    """Base class for all lob_sdk errors."""


class DivisionByZeroError(LobSdkError, ZeroDivisionError):
    """Raised when a vector is divided by a scalar equal to zero."""


class EmptyInputError(LobSdkError, ValueError):
    """Raised when an operation needs at least one element and got none."""


class ConfigError(LobSdkError, ValueError):
    """Raised when a configuration file holds invalid values."""
