"""
Input validation utilities for passgen.
"""

from typing import Any


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a meaningful length or count
    return isinstance(value, int) and not isinstance(value, bool)


def validate_length(length: Any) -> bool:
    """
    Validate a requested password length.

    Args:
        length: The length to validate

    Returns:
        True if length is a non-negative integer, False otherwise
    """
    return _is_int(length) and length >= 0


def validate_count(count: Any) -> bool:
    """
    Validate a requested number of passwords.

    Args:
        count: The count to validate

    Returns:
        True if count is a positive integer, False otherwise
    """
    return _is_int(count) and count >= 1


def get_validation_error_message(name: str, value: Any) -> str:
    """
    Get a descriptive error message for an invalid length or count.

    Args:
        name: Argument name, "length" or "count"
        value: The invalid value

    Returns:
        Error message describing why the value is invalid
    """
    if not _is_int(value):
        return f"{name.capitalize()} must be an integer, got {type(value).__name__}"

    if name == "count":
        return f"Count must be at least 1, got {value}"

    return f"Length cannot be negative, got {value}"
