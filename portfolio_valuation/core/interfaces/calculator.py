"""
Portfolio valuation interfaces.
"""

from abc import ABC, abstractmethod
from datetime import date


class IPortfolioCalculator(ABC):
    """Abstract interface for portfolio valuation."""

    @abstractmethod
    def calculate_investor_portfolio_value(self, investor_id: str, value_date: date) -> float:
        """Calculate whole portfolio value of an investor on a date."""
        pass

    @abstractmethod
    def calculate_shares_investments_value(self, investor_id: str, value_date: date) -> float:
        """Calculate value of an investor's stock holdings on a date."""
        pass

    @abstractmethod
    def calculate_fond_investments_value(self, investor_id: str, value_date: date) -> float:
        """Calculate value of an investor's fund stakes on a date."""
        pass

    @abstractmethod
    def calculate_property_investments_value(self, investor_id: str, value_date: date) -> float:
        """Calculate value of an investor's real estate on a date."""
        pass
