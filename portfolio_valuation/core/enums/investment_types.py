"""
Investment type enumerations.

This module defines the asset classes an investment can belong to.
"""

from enum import StrEnum


class InvestmentType(StrEnum):
    """
    Allowed investment types.

    Values match the labels used by the investment datasets.
    """

    STOCK = "Stock"
    FONDS = "Fonds"
    REAL_ESTATE = "RealEstate"

    @property
    def is_stock(self) -> bool:
        """Check if investment type is a stock holding."""
        return self == self.STOCK

    @property
    def is_fund(self) -> bool:
        """Check if investment type is a stake in a fund."""
        return self == self.FONDS

    @property
    def is_real_estate(self) -> bool:
        """Check if investment type is a property holding."""
        return self == self.REAL_ESTATE
