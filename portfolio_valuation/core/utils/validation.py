"""
Validation utilities for core domain models.

Provides consistent validation across the application.
"""

from collections.abc import Iterable
from datetime import date, datetime
from typing import Any, TypeVar

from portfolio_valuation.core.exceptions.valuation import (
    InvalidConstructionError,
    ValidationError,
)

T = TypeVar("T")


def validate_dataset(records: Iterable[T] | None, param_name: str) -> Iterable[T]:
    """Validate that a dataset reference is present.

    Args:
        records: Dataset to validate, may be empty
        param_name: Parameter name for error messages

    Returns:
        The validated dataset

    Raises:
        InvalidConstructionError: If the dataset is None
    """
    if records is None:
        raise InvalidConstructionError(param_name)
    return records


def validate_positive_int(value: int, param_name: str) -> int:
    """Validate that a count is a positive integer.

    Raises:
        ValidationError: If value is not positive
    """
    if value <= 0:
        raise ValidationError(f"{param_name} must be positive, got {value}")
    return value


def as_calendar_date(value: date | datetime) -> date:
    """Normalize a date or datetime to a calendar date.

    Raises:
        TypeError: If value is neither a date nor a datetime
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"value_date must be date or datetime, got {type(value).__name__}")
