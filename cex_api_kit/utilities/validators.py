"""
Input validation utilities.

This module provides validation and coercion helpers for client parameters and
transaction filters used throughout the library.
"""

from datetime import datetime
from typing import Any


def validate_positive_number(value: int | float, name: str) -> None:
    """Validate that a number is positive."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_page_size(value: int, name: str = "limit") -> None:
    """Validate that a page size is a whole number of at least one record."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")


def validate_non_empty_string(value: str, name: str) -> None:
    """Validate that a string is not empty."""
    if not value or not value.strip():
        raise ValueError(f"{name} cannot be empty")


def to_milliseconds(value: Any) -> int:
    """
    Convert a timestamp in seconds to integer milliseconds.

    Accepts ints, floats, numeric strings and datetimes.

    Raises:
        ValueError: If the value cannot be interpreted as a timestamp
    """
    if isinstance(value, datetime):
        return int(round(value.timestamp() * 1000))

    try:
        return int(round(float(value) * 1000))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid timestamp: {value!r}") from e
