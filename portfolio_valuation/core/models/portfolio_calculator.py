"""
Portfolio valuation engine.

This module values an investor's stock, fund and real estate holdings as of an
arbitrary date against a frozen snapshot of investments, transactions and
quotes.
"""

from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime
from types import TracebackType
from typing import TypeVar

from loguru import logger

from portfolio_valuation.core.constants import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_PARALLEL_THRESHOLD,
)
from portfolio_valuation.core.interfaces.calculator import IPortfolioCalculator
from portfolio_valuation.core.models.investment import FundInvestment, Investment
from portfolio_valuation.core.models.quote import Quote
from portfolio_valuation.core.models.record_store import RecordStore
from portfolio_valuation.core.models.transaction import Transaction
from portfolio_valuation.core.types.financial import (
    ZERO,
    apply_ownership_percentage,
    sum_values,
)
from portfolio_valuation.core.utils.decorators import log_valuation
from portfolio_valuation.core.utils.validation import as_calendar_date, validate_positive_int

from .valuation_helpers import (
    is_fund_stake,
    is_located_property,
    is_priced_stock,
    property_value,
    stake_percentage,
    stock_value,
)

I = TypeVar("I", bound=Investment)


class PortfolioCalculator(IPortfolioCalculator):
    """
    Values investor portfolios as of a date.

    Features:
    - Stock holdings priced with the last quote on or before the value date
    - Real estate valued by accumulated estate and building transactions
    - Fund stakes valued as a share of the fund's own stock and real estate
    - Per-investment fan-out over a bounded worker pool

    Fund market value is the fund's shares plus property value only. Stakes a
    fund holds in other funds are not valued, so fund chains resolve one level
    deep.

    Thread Safety:
        Queries only read the immutable RecordStore and may be issued
        concurrently. Per-investment results are gathered in input order and
        summed sequentially, so totals do not depend on scheduling.
    """

    def __init__(
        self,
        investments: Iterable[Investment] | None,
        transactions: Iterable[Transaction] | None,
        quotes: Iterable[Quote] | None,
        max_workers: int | None = None,
        parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD,
    ):
        """
        Initialize the calculator with the full snapshot of portfolio data.

        Args:
            investments: All available investments
            transactions: All available transactions
            quotes: All available quotes
            max_workers: Worker pool size (default: CPU count minus one)
            parallel_threshold: Minimum number of investments before fanning out

        Raises:
            InvalidConstructionError: If any dataset is None
            ValidationError: If max_workers or parallel_threshold is not positive
        """
        self._store = RecordStore(investments, transactions, quotes)
        self._max_workers = validate_positive_int(
            DEFAULT_MAX_WORKERS if max_workers is None else max_workers, "max_workers"
        )
        self._parallel_threshold = validate_positive_int(parallel_threshold, "parallel_threshold")
        self._executor: ThreadPoolExecutor | None = None
        if self._max_workers > 1:
            self._executor = ThreadPoolExecutor(
                max_workers=self._max_workers, thread_name_prefix="valuation"
            )

        logger.info(f"Portfolio calculator ready with {self._max_workers} worker(s)")

    @property
    def store(self) -> RecordStore:
        """Indexed snapshot the calculator values against.

        Read-only; exposed for inspecting the loaded datasets.
        """
        return self._store

    @log_valuation
    def calculate_investor_portfolio_value(
        self, investor_id: str, value_date: date | datetime
    ) -> float:
        """Calculate whole portfolio value: shares + funds + property."""
        return (
            self.calculate_shares_investments_value(investor_id, value_date)
            + self.calculate_fond_investments_value(investor_id, value_date)
            + self.calculate_property_investments_value(investor_id, value_date)
        )

    @log_valuation
    def calculate_shares_investments_value(
        self, investor_id: str, value_date: date | datetime
    ) -> float:
        """Calculate value of stock holdings.

        Each holding is its net share count as of the date times the last
        quote on or before the date. Holdings without a quote are worth zero.
        """
        value_date = as_calendar_date(value_date)
        stocks = [i for i in self._store.investments_of(investor_id) if is_priced_stock(i)]
        return sum_values(self._value_each(stock_value, stocks, value_date))

    @log_valuation
    def calculate_property_investments_value(
        self, investor_id: str, value_date: date | datetime
    ) -> float:
        """Calculate value of real estate: estate plus building movements as of the date."""
        value_date = as_calendar_date(value_date)
        properties = [
            i for i in self._store.investments_of(investor_id) if is_located_property(i)
        ]
        return sum_values(self._value_each(property_value, properties, value_date))

    @log_valuation
    def calculate_fond_investments_value(
        self, investor_id: str, value_date: date | datetime
    ) -> float:
        """Calculate value of fund stakes.

        For every distinct fund the investor holds a stake in, the fund's
        market value is weighted by the investor's accumulated ownership
        percentage (0-100 scale, unclamped).
        """
        value_date = as_calendar_date(value_date)
        stakes: list[FundInvestment] = [
            i for i in self._store.investments_of(investor_id) if is_fund_stake(i)
        ]
        if not stakes:
            return ZERO

        owned = self._owned_percentages(stakes, value_date)
        return sum_values(
            apply_ownership_percentage(self._fund_market_value(fund_id, value_date), percentage)
            for fund_id, percentage in owned.items()
        )

    def _fund_market_value(self, fund_id: str, value_date: date) -> float:
        """Value of a fund's own holdings, excluding its stakes in other funds."""
        return self.calculate_shares_investments_value(
            fund_id, value_date
        ) + self.calculate_property_investments_value(fund_id, value_date)

    def _owned_percentages(
        self, stakes: Sequence[FundInvestment], value_date: date
    ) -> dict[str, float]:
        """Total ownership percentage per fund, in order of first stake."""
        percentages = self._value_each(stake_percentage, stakes, value_date)
        owned: dict[str, float] = {}
        for stake, percentage in zip(stakes, percentages, strict=True):
            owned[stake.fund_investor] = owned.get(stake.fund_investor, ZERO) + percentage
        return owned

    def _value_each(
        self,
        valuer: Callable[[RecordStore, I, date], float],
        investments: Sequence[I],
        value_date: date,
    ) -> list[float]:
        """Value investments one by one, on the pool when the list is long enough.

        Results keep the order of ``investments``.
        """
        executor = self._executor
        if executor is None or len(investments) < self._parallel_threshold:
            return [valuer(self._store, investment, value_date) for investment in investments]

        logger.debug(f"Fanning out {len(investments)} investments over {self._max_workers} workers")
        try:
            return list(
                executor.map(
                    lambda investment: valuer(self._store, investment, value_date), investments
                )
            )
        except RuntimeError:
            # Pool shut down by a concurrent close()
            logger.debug("Worker pool closed during valuation, continuing inline")
            return [valuer(self._store, investment, value_date) for investment in investments]

    def close(self) -> None:
        """Shut down the worker pool."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
            logger.debug("Portfolio calculator worker pool shut down")

    def __enter__(self) -> "PortfolioCalculator":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
