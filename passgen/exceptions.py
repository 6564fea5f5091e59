"""
Custom exceptions for passgen.
"""


class PassgenException(Exception):
    """Base exception for passgen."""

    pass


class PoolExhaustedError(PassgenException):
    """A required draw has no characters available."""

    pass


class InvalidArgumentError(PassgenException, ValueError):
    """Invalid length or count passed to a generator."""

    pass
