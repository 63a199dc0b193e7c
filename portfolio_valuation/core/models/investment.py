"""
Investment domain models.

An investment is a tagged union: each asset class has its own record type
carrying only the field that is meaningful for it.
"""

from dataclasses import dataclass
from typing import ClassVar

from portfolio_valuation.core.enums import InvestmentType
from portfolio_valuation.core.exceptions.valuation import DataError


@dataclass(frozen=True, slots=True)
class StockInvestment:
    """Direct holding of a listed security identified by its ISIN."""

    investor_id: str
    investment_id: str
    share_id: str = ""

    investment_type: ClassVar[InvestmentType] = InvestmentType.STOCK

    @property
    def is_valuable(self) -> bool:
        """Check if the holding references a security that can be priced."""
        return bool(self.share_id)


@dataclass(frozen=True, slots=True)
class FundInvestment:
    """Percentage stake in a fund.

    ``fund_investor`` is the fund's own id: it is the key its percentage
    transactions are grouped under and the investor id its holdings are
    recorded with.
    """

    investor_id: str
    investment_id: str
    fund_investor: str = ""

    investment_type: ClassVar[InvestmentType] = InvestmentType.FONDS

    @property
    def is_valuable(self) -> bool:
        """Check if the stake names a fund."""
        return bool(self.fund_investor)


@dataclass(frozen=True, slots=True)
class RealEstateInvestment:
    """Property holding valued by its estate and building transactions."""

    investor_id: str
    investment_id: str
    city: str = ""

    investment_type: ClassVar[InvestmentType] = InvestmentType.REAL_ESTATE

    @property
    def is_valuable(self) -> bool:
        """Check if the property has a location on record."""
        return bool(self.city)


Investment = StockInvestment | FundInvestment | RealEstateInvestment


def create_investment(
    investor_id: str,
    investment_id: str,
    investment_type: InvestmentType | str,
    share_id: str | None = None,
    fund_investor: str | None = None,
    city: str | None = None,
) -> Investment:
    """Factory building the investment variant selected by ``investment_type``.

    Fields belonging to other variants are ignored.

    Args:
        investor_id: Owning investor (or fund acting as investor)
        investment_id: Key joining the investment to its transactions
        investment_type: Asset class, enum or its dataset label
        share_id: Security id, used for stocks
        fund_investor: Fund id, used for fund stakes
        city: Property location, used for real estate

    Returns:
        The matching investment record

    Raises:
        DataError: If the investment type is unknown
    """
    try:
        kind = InvestmentType(investment_type)
    except ValueError as e:
        raise DataError(f"Unknown investment type: {investment_type!r}") from e

    if kind.is_stock:
        return StockInvestment(investor_id, investment_id, share_id or "")
    if kind.is_fund:
        return FundInvestment(investor_id, investment_id, fund_investor or "")
    return RealEstateInvestment(investor_id, investment_id, city or "")
