"""
Interactive console for portfolio valuation.

Loads the three portfolio files, then answers "<date>;<investorId>" queries
read line by line until an empty line or end of input.
"""

import argparse
import asyncio
import sys
from collections.abc import Callable, Iterable, Sequence
from datetime import date
from pathlib import Path

import pandas as pd
from loguru import logger

from portfolio_valuation.core.constants import (
    CSV_DATE_FORMAT,
    IMPORT_FILES_DEFAULT_FOLDER_NAME,
    INVESTMENTS_FILE_NAME,
    QUOTES_FILE_NAME,
    TRANSACTIONS_FILE_NAME,
)
from portfolio_valuation.core.exceptions.valuation import PortfolioException, ValidationError
from portfolio_valuation.core.interfaces.calculator import IPortfolioCalculator
from portfolio_valuation.core.interfaces.reader import IPortfolioReader
from portfolio_valuation.core.models.portfolio_calculator import PortfolioCalculator
from portfolio_valuation.infrastructure.data import CSVPortfolioReader, CSVReaderConfig

QUERY_SEPARATOR = ";"
RELATIVE_DATE_WORDS = frozenset({"now", "today"})
PROMPT = "Please enter investor id and date"


def parse_query(line: str) -> tuple[date, str]:
    """Parse a "<date>;<investorId>" query with an ISO (YYYY-MM-DD) date.

    Raises:
        ValidationError: With the message shown to the user
    """
    parts = line.split(QUERY_SEPARATOR)
    if len(parts) != 2:
        raise ValidationError("Wrong input")

    date_text, investor_id = parts
    date_text = date_text.strip()
    # pandas resolves these relative to the clock even with an explicit format
    if date_text.lower() in RELATIVE_DATE_WORDS:
        raise ValidationError("Date couldn't be parsed")
    try:
        timestamp = pd.to_datetime(date_text, format=CSV_DATE_FORMAT)
    except (ValueError, TypeError, OverflowError) as e:
        raise ValidationError("Date couldn't be parsed") from e
    if pd.isna(timestamp):
        raise ValidationError("Date couldn't be parsed")

    investor_id = investor_id.strip()
    if not investor_id:
        raise ValidationError("Investor id is empty")

    return timestamp.date(), investor_id


def format_portfolio_value(investor_id: str, value: float) -> str:
    """Format a valuation result line."""
    return f"{investor_id} portfolio values is {value:,.2f}"


def run_queries(
    calculator: IPortfolioCalculator, lines: Iterable[str], write: Callable[[str], None]
) -> int:
    """Answer queries until a blank line or end of input.

    Returns:
        Number of queries answered with a value
    """
    answered = 0
    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        if not line.strip():
            break

        try:
            value_date, investor_id = parse_query(line)
        except ValidationError as e:
            write(str(e))
            continue

        value = calculator.calculate_investor_portfolio_value(investor_id, value_date)
        write(format_portfolio_value(investor_id, value))
        answered += 1

    return answered


async def load_calculator(reader: IPortfolioReader, **calculator_options) -> PortfolioCalculator:
    """Read all three datasets concurrently and build a calculator from them."""
    investments, transactions, quotes = await asyncio.gather(
        reader.get_investments(), reader.get_transactions(), reader.get_quotes()
    )
    return PortfolioCalculator(investments, transactions, quotes, **calculator_options)


def build_reader(paths: Sequence[str], delimiter: str) -> CSVPortfolioReader:
    """Reader over the given three paths, or the default import folder when none are given."""
    config = CSVReaderConfig(delimiter=delimiter)
    if len(paths) == 3:
        return CSVPortfolioReader(paths[0], paths[1], paths[2], config)
    if paths:
        raise ValidationError(
            f"Expected 3 file paths (investments, transactions, quotes), got {len(paths)}"
        )

    import_dir = Path.cwd() / IMPORT_FILES_DEFAULT_FOLDER_NAME
    return CSVPortfolioReader(
        import_dir / INVESTMENTS_FILE_NAME,
        import_dir / TRANSACTIONS_FILE_NAME,
        import_dir / QUOTES_FILE_NAME,
        config,
    )


def setup_logging(debug: bool = False) -> None:
    """Configure logging with loguru."""
    logger.remove()

    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Calculate investor portfolio values as of a date",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Use {IMPORT_FILES_DEFAULT_FOLDER_NAME}/ in the working directory
  portfolio-valuation

  # Explicit files, then enter queries such as 2018-01-01;Investor0
  portfolio-valuation Investments.csv Transactions.csv Quotes.csv
        """,
    )

    parser.add_argument(
        "paths",
        nargs="*",
        help="Investments, transactions and quotes CSV files, in this order",
    )

    parser.add_argument(
        "--delimiter", type=str, default=";", help="CSV field delimiter (default: ;)"
    )

    parser.add_argument(
        "--max-workers", type=int, default=None, help="Valuation worker pool size"
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    setup_logging(args.debug)

    try:
        reader = build_reader(args.paths, args.delimiter)
        calculator = asyncio.run(load_calculator(reader, max_workers=args.max_workers))
    except PortfolioException as e:
        logger.error(f"Could not load portfolio data: {e}")
        return 1

    print(PROMPT)
    with calculator:
        run_queries(calculator, sys.stdin, print)

    return 0


if __name__ == "__main__":
    sys.exit(main())
