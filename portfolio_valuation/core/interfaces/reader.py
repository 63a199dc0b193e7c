"""
Data access interfaces.
"""

from abc import ABC, abstractmethod

from portfolio_valuation.core.models.investment import Investment
from portfolio_valuation.core.models.quote import Quote
from portfolio_valuation.core.models.transaction import Transaction


class IPortfolioReader(ABC):
    """Abstract interface for sources of investments, transactions and quotes.

    Each method returns a fully materialised list. Reads are cancelled by
    cancelling the awaiting task.
    """

    @abstractmethod
    async def get_investments(self) -> list[Investment]:
        """Load all investments."""
        pass

    @abstractmethod
    async def get_transactions(self) -> list[Transaction]:
        """Load all transactions."""
        pass

    @abstractmethod
    async def get_quotes(self) -> list[Quote]:
        """Load all quotes."""
        pass
