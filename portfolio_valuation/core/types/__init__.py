"""
Core type definitions and utilities.
"""

# Re-export financial utilities for easy access
from .financial import (
    HUNDRED,
    ZERO,
    apply_ownership_percentage,
    calculate_position_value,
    safe_float_comparison,
    sum_values,
)

__all__ = [
    # Utility functions
    "sum_values",
    "calculate_position_value",
    "apply_ownership_percentage",
    "safe_float_comparison",
    # Constants
    "ZERO",
    "HUNDRED",
]
