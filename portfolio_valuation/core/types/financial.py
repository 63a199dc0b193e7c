"""
Financial value helpers for portfolio valuation.

Values are plain floats. Sums are accumulated in input order so that repeated
valuations of the same snapshot are bit-identical.
"""

from collections.abc import Iterable

from portfolio_valuation.core.constants import PERCENT_SCALE, VALUE_TOLERANCE

ZERO = 0.0
HUNDRED = PERCENT_SCALE


def sum_values(values: Iterable[float]) -> float:
    """Sum values left to right, starting from ZERO."""
    total = ZERO
    for value in values:
        total += value
    return total


def calculate_position_value(net_shares: float, price_per_share: float) -> float:
    """Value of a share position at the given price."""
    return net_shares * price_per_share


def apply_ownership_percentage(market_value: float, percentage: float) -> float:
    """Portion of a market value owned at a 0-100 percentage (unclamped).

    Examples:
        >>> apply_ownership_percentage(2000.0, 5.0)
        100.0
    """
    return market_value * percentage / HUNDRED


def safe_float_comparison(a: float, b: float, tolerance: float = VALUE_TOLERANCE) -> bool:
    """Compare floats with tolerance for precision issues.

    Examples:
        >>> safe_float_comparison(0.1 + 0.2, 0.3)
        True
        >>> safe_float_comparison(1000000.1, 1000000.2, 0.01)
        False
    """
    return abs(a - b) < tolerance
