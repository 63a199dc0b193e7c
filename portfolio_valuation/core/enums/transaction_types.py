"""
Transaction type enumerations.

This module defines the kinds of dated value movements recorded against investments.
"""

from enum import StrEnum


class TransactionType(StrEnum):
    """
    Allowed transaction types.

    Shares carry share-count deltas, Percentage carries ownership deltas on a
    0-100 scale, Estate and Building carry money deltas.
    """

    SHARES = "Shares"
    PERCENTAGE = "Percentage"
    ESTATE = "Estate"
    BUILDING = "Building"

