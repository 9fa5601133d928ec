"""
Error taxonomy for the converter bounded context.
Every error is recoverable: boundaries turn them into responses, never crashes.
"""


class ConverterError(Exception):
    """Base class for all converter errors."""


class InvalidAmount(ConverterError, ValueError):
    """Raised when user text cannot be interpreted as an amount."""

    def __init__(self, raw: str, message: str | None = None):
        self.raw = raw
        super().__init__(message or f"Invalid amount: {raw!r} is not a number")


class ConversionUnavailable(ConverterError):
    """Raised when the external conversion service cannot answer a request."""

    def __init__(self, source: str, target: str, reason: str):
        self.source = source
        self.target = target
        self.reason = reason
        super().__init__(f"Conversion {source}->{target} unavailable: {reason}")


class RenderingFailure(ConverterError):
    """Raised when the presentation layer cannot produce a page."""
