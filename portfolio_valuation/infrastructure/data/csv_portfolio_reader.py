"""
CSV Portfolio Reader implementation.

This module loads investments, transactions and quotes from three
delimiter-separated files with validation and cooperative cancellation.
"""

import asyncio
import threading
from collections.abc import Callable
from typing import TypeVar
from pathlib import Path

import pandas as pd
from loguru import logger

from portfolio_valuation.core.constants import (
    INVESTMENT_COLUMNS,
    QUOTE_COLUMNS,
    TRANSACTION_COLUMNS,
)
from portfolio_valuation.core.exceptions.valuation import DataError, ValidationError
from portfolio_valuation.core.interfaces.reader import IPortfolioReader
from portfolio_valuation.core.models.investment import Investment
from portfolio_valuation.core.models.quote import Quote
from portfolio_valuation.core.models.transaction import Transaction

from .csv_config import CSVReaderConfig
from .csv_utils import CSVUtils
from .csv_validator import CSVValidator

R = TypeVar("R")


class CSVPortfolioReader(IPortfolioReader):
    """
    CSV-based portfolio reader.

    Portfolio data is split into three files: investments, transactions and
    quotes. Each file is read in chunks on the default executor; cancelling
    the awaiting task stops the read at the next chunk boundary.
    """

    def __init__(
        self,
        investments_file_path: str | Path,
        transactions_file_path: str | Path,
        quotes_file_path: str | Path,
        config: CSVReaderConfig | None = None,
    ):
        """
        Initialize the reader.

        Args:
            investments_file_path: Path to the investments .csv file
            transactions_file_path: Path to the transactions .csv file
            quotes_file_path: Path to the quotes .csv file
            config: CSV settings (default: semicolon delimiter, header validation)

        Raises:
            ValidationError: If a path is empty, not a .csv file, or does not exist
        """
        self.investments_file_path = CSVValidator.validate_file_path(
            investments_file_path, "investments_file_path"
        )
        self.transactions_file_path = CSVValidator.validate_file_path(
            transactions_file_path, "transactions_file_path"
        )
        self.quotes_file_path = CSVValidator.validate_file_path(
            quotes_file_path, "quotes_file_path"
        )
        self.config = config or CSVReaderConfig()

    async def get_investments(self) -> list[Investment]:
        """Load all investments."""
        return await self._load_records(
            self.investments_file_path, INVESTMENT_COLUMNS, CSVUtils.to_investments
        )

    async def get_transactions(self) -> list[Transaction]:
        """Load all transactions."""
        return await self._load_records(
            self.transactions_file_path,
            TRANSACTION_COLUMNS,
            lambda df: CSVUtils.to_transactions(df, self.config.date_format),
        )

    async def get_quotes(self) -> list[Quote]:
        """Load all quotes."""
        return await self._load_records(
            self.quotes_file_path,
            QUOTE_COLUMNS,
            lambda df: CSVUtils.to_quotes(df, self.config.date_format),
        )

    async def _load_records(
        self,
        file_path: Path,
        expected_columns: list[str],
        to_records: Callable[[pd.DataFrame], list[R]],
    ) -> list[R]:
        """Read a file off the event loop and convert it to records."""
        loop = asyncio.get_running_loop()
        cancelled = threading.Event()

        def _read_and_convert() -> list[R]:
            df = self._read_frame(file_path, expected_columns, cancelled)
            if df.empty:
                return []
            return to_records(df)

        logger.debug(f"Loading file: {file_path}")
        try:
            records = await loop.run_in_executor(None, _read_and_convert)
        except asyncio.CancelledError:
            cancelled.set()
            logger.warning(f"Loading cancelled: {file_path.name}")
            raise
        except (DataError, ValidationError):
            raise
        except OSError as e:
            logger.error(f"File system error loading {file_path.name}: {e}")
            raise DataError(f"File system error loading {file_path.name}") from e
        except (pd.errors.ParserError, UnicodeDecodeError, ValueError) as e:
            logger.error(f"CSV parsing error ({type(e).__name__}) in {file_path.name}: {e}")
            raise DataError(f"Failed to parse CSV file: {file_path.name}") from e

        logger.info(f"Loaded {len(records)} records from {file_path.name}")
        return records

    def _read_frame(
        self, file_path: Path, expected_columns: list[str], cancelled: threading.Event
    ) -> pd.DataFrame:
        """Read a CSV file chunk by chunk, stopping once ``cancelled`` is set."""
        chunks: list[pd.DataFrame] = []
        try:
            with pd.read_csv(
                file_path,
                sep=self.config.delimiter,
                dtype=str,
                keep_default_na=False,
                encoding=self.config.encoding,
                chunksize=self.config.chunk_size,
            ) as reader:
                for chunk in reader:
                    if cancelled.is_set():
                        logger.debug(f"Stopping read of {file_path.name} after cancellation")
                        return pd.DataFrame(columns=expected_columns)
                    chunks.append(chunk)
        except pd.errors.EmptyDataError:
            logger.warning(f"Empty data file: {file_path.name}")
            return pd.DataFrame(columns=expected_columns)

        if not chunks:
            return pd.DataFrame(columns=expected_columns)

        df = pd.concat(chunks, ignore_index=True)
        df.columns = [str(c).strip() for c in df.columns]
        return self._align_columns(df, expected_columns, file_path)

    def _align_columns(
        self, df: pd.DataFrame, expected_columns: list[str], file_path: Path
    ) -> pd.DataFrame:
        """Select expected columns by name, or by position when header validation is off."""
        if self.config.validate_headers:
            CSVValidator.validate_csv_columns(df, expected_columns, file_path)
            aligned = df[expected_columns]
            CSVValidator.validate_complete_rows(aligned, file_path)
            return aligned

        CSVValidator.validate_field_count(df, expected_columns, file_path)
        positional = df.iloc[:, : len(expected_columns)].copy()
        positional.columns = expected_columns
        CSVValidator.validate_complete_rows(positional, file_path)
        return positional
