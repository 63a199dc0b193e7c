"""
Record store for portfolio datasets.

This module groups the three immutable datasets into lookup indices once,
so valuation queries never scan the raw collections.
"""

from collections import defaultdict
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import TypeVar

import numpy as np
from loguru import logger

from portfolio_valuation.core.models.investment import Investment
from portfolio_valuation.core.models.quote import Quote
from portfolio_valuation.core.models.transaction import Transaction
from portfolio_valuation.core.utils.validation import validate_dataset

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class QuoteSeries:
    """Date-ascending quotes of one security, one quote per date."""

    quotes: tuple[Quote, ...]
    dates: np.ndarray

    @classmethod
    def from_quotes(cls, quotes: Iterable[Quote]) -> "QuoteSeries":
        """Build a series keeping the first quote seen for each date."""
        by_date: dict[date, Quote] = {}
        for quote in quotes:
            by_date.setdefault(quote.date, quote)

        ordered = tuple(by_date[d] for d in sorted(by_date))
        dates = np.array([q.date for q in ordered], dtype="datetime64[D]")
        dates.flags.writeable = False
        return cls(quotes=ordered, dates=dates)

    def last_at_or_before(self, value_date: date) -> Quote | None:
        """Return the latest quote dated on or before ``value_date``."""
        index = int(np.searchsorted(self.dates, np.datetime64(value_date, "D"), side="right"))
        if index == 0:
            return None
        return self.quotes[index - 1]

    def __len__(self) -> int:
        return len(self.quotes)


class RecordStore:
    """Read-only indices over investments, transactions and quotes.

    Thread Safety:
        The indices are built in the constructor and never mutated, so an
        instance can be shared freely between threads.
    """

    def __init__(
        self,
        investments: Iterable[Investment] | None,
        transactions: Iterable[Transaction] | None,
        quotes: Iterable[Quote] | None,
    ):
        """
        Build the lookup indices.

        Args:
            investments: All investments, may be empty
            transactions: All transactions, may be empty
            quotes: All quotes, may be empty

        Raises:
            InvalidConstructionError: If any dataset is None
        """
        investments = validate_dataset(investments, "investments")
        transactions = validate_dataset(transactions, "transactions")
        quotes = validate_dataset(quotes, "quotes")

        self._investments_by_investor = self._group(investments, lambda i: i.investor_id)
        self._transactions_by_investment = self._group(transactions, lambda t: t.investment_id)
        self._quotes_by_security = self._build_quote_index(quotes)

        logger.debug(
            f"Record store built: {len(self._investments_by_investor)} investors, "
            f"{len(self._transactions_by_investment)} investments with transactions, "
            f"{len(self._quotes_by_security)} quoted securities"
        )

    @staticmethod
    def _group(
        records: Iterable[T], key: Callable[[T], str]
    ) -> Mapping[str, tuple[T, ...]]:
        """Group records by key, keeping dataset order within each group."""
        grouped: defaultdict[str, list[T]] = defaultdict(list)
        for record in records:
            grouped[key(record)].append(record)
        return MappingProxyType({k: tuple(v) for k, v in grouped.items()})

    @staticmethod
    def _build_quote_index(quotes: Iterable[Quote]) -> Mapping[str, QuoteSeries]:
        """Group quotes by security into date-ordered series."""
        grouped: defaultdict[str, list[Quote]] = defaultdict(list)
        for quote in quotes:
            grouped[quote.id].append(quote)
        return MappingProxyType(
            {security_id: QuoteSeries.from_quotes(qs) for security_id, qs in grouped.items()}
        )

    def investments_of(self, investor_id: str) -> tuple[Investment, ...]:
        """Investments owned by an investor, empty for unknown investors."""
        return self._investments_by_investor.get(investor_id, ())

    def transactions_of(self, investment_id: str) -> tuple[Transaction, ...]:
        """Transactions of an investment, empty for unknown investments."""
        return self._transactions_by_investment.get(investment_id, ())

    def last_quote_at_or_before(self, security_id: str, value_date: date) -> Quote | None:
        """Most recent quote of a security dated on or before ``value_date``.

        Returns None when the security is unknown or all its quotes are later.
        """
        series = self.quote_series(security_id)
        if series is None:
            return None
        return series.last_at_or_before(value_date)

    def quote_series(self, security_id: str) -> QuoteSeries | None:
        """Full quote series of a security, None when it has no quotes.

        Exposed for inspecting what was loaded, e.g. after reading CSV files.
        """
        return self._quotes_by_security.get(security_id)

