"""
Transaction domain model.
"""

from dataclasses import dataclass
from datetime import date

from portfolio_valuation.core.enums import TransactionType


@dataclass(frozen=True, slots=True)
class Transaction:
    """Dated value movement recorded against one investment.

    ``value`` is a share-count delta for Shares, a percentage-point delta for
    Percentage and a money delta for Estate and Building.
    """

    investment_id: str
    type: TransactionType
    date: date
    value: float

    def is_effective_on(self, value_date: date) -> bool:
        """Check if the transaction has happened by the given date."""
        return self.date <= value_date
