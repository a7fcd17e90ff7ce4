"""
tribucket exceptions module.

Contains exception classes shared by the downsampling entry points.
"""


class ConversionError(ArithmeticError):
    """Exception raised when a bucket boundary cannot be represented as an index."""

    pass


class SeriesTooLongError(ValueError):
    """Exception raised when a series exceeds the configured length limit."""

    pass
