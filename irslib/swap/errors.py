"""
Exception types raised by the swap leg model and pricing environments.
"""


class IrsLibError(Exception):
    """Base class for errors raised by irslib."""

    pass


class ValidationError(IrsLibError, ValueError):
    """Raised when a value object is constructed from inconsistent inputs."""

    pass


class ExpansionError(IrsLibError, RuntimeError):
    """Raised when a swap leg cannot be expanded into payment periods and events."""

    pass


class UnsupportedQueryError(IrsLibError, LookupError):
    """Raised when a pricing environment cannot answer a market data query."""

    pass
