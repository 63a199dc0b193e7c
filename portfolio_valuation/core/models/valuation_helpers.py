"""Per-investment valuation helpers for PortfolioCalculator.

Each helper values a single investment against a RecordStore and is safe to
run on worker threads: none of them submits further work to a pool.
"""

from collections.abc import Iterable
from datetime import date

from portfolio_valuation.core.enums import TransactionType
from portfolio_valuation.core.models.investment import (
    FundInvestment,
    Investment,
    RealEstateInvestment,
    StockInvestment,
)
from portfolio_valuation.core.models.record_store import RecordStore
from portfolio_valuation.core.models.transaction import Transaction
from portfolio_valuation.core.types.financial import (
    ZERO,
    calculate_position_value,
    sum_values,
)


def sum_transactions(
    transactions: Iterable[Transaction],
    value_date: date,
    accepted_types: frozenset[TransactionType],
) -> float:
    """Sum values of transactions of the accepted types dated on or before ``value_date``."""
    return sum_values(
        t.value for t in transactions if t.type in accepted_types and t.is_effective_on(value_date)
    )


SHARE_TYPES = frozenset({TransactionType.SHARES})
PERCENTAGE_TYPES = frozenset({TransactionType.PERCENTAGE})
PROPERTY_TYPES = frozenset({TransactionType.ESTATE, TransactionType.BUILDING})


def is_priced_stock(investment: Investment) -> bool:
    """Stock holdings with a security id."""
    return isinstance(investment, StockInvestment) and investment.is_valuable


def is_located_property(investment: Investment) -> bool:
    """Real estate holdings with a city."""
    return isinstance(investment, RealEstateInvestment) and investment.is_valuable


def is_fund_stake(investment: Investment) -> bool:
    """Fund stakes naming a fund."""
    return isinstance(investment, FundInvestment) and investment.is_valuable


def net_shares(store: RecordStore, investment: StockInvestment, value_date: date) -> float:
    """Net share count of a stock holding as of ``value_date``."""
    return sum_transactions(
        store.transactions_of(investment.investment_id), value_date, SHARE_TYPES
    )


def stock_value(store: RecordStore, investment: StockInvestment, value_date: date) -> float:
    """Net shares times the last known price; unpriced securities are worth ZERO."""
    quote = store.last_quote_at_or_before(investment.share_id, value_date)
    if quote is None:
        return ZERO
    return calculate_position_value(
        net_shares(store, investment, value_date), quote.price_per_share
    )


def property_value(store: RecordStore, investment: RealEstateInvestment, value_date: date) -> float:
    """Accumulated estate and building value of a property as of ``value_date``."""
    return sum_transactions(
        store.transactions_of(investment.investment_id), value_date, PROPERTY_TYPES
    )


def stake_percentage(store: RecordStore, investment: FundInvestment, value_date: date) -> float:
    """Ownership percentage moved by one fund stake as of ``value_date`` (unclamped)."""
    return sum_transactions(
        store.transactions_of(investment.investment_id), value_date, PERCENTAGE_TYPES
    )
