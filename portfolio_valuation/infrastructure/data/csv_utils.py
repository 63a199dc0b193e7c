"""
CSV record conversion utilities.

This module turns DataFrames read from the portfolio CSV files into domain records.
"""

import pandas as pd

from portfolio_valuation.core.enums import TransactionType
from portfolio_valuation.core.exceptions.valuation import DataError
from portfolio_valuation.core.models.investment import Investment, create_investment
from portfolio_valuation.core.models.quote import Quote
from portfolio_valuation.core.models.transaction import Transaction


class CSVUtils:
    """Conversion helpers from DataFrame columns to domain records."""

    @staticmethod
    def to_investments(df: pd.DataFrame) -> list[Investment]:
        """Build investments, keeping only the field that matches each row's type."""
        text = df.apply(lambda column: column.str.strip())
        return [
            create_investment(
                investor_id=investor_id,
                investment_id=investment_id,
                investment_type=investment_type,
                share_id=share_id,
                fund_investor=fund_investor,
                city=city,
            )
            for investor_id, investment_id, investment_type, share_id, city, fund_investor in zip(
                text["InvestorId"],
                text["InvestmentId"],
                text["InvestmentType"],
                text["ISIN"],
                text["City"],
                text["FondsInvestor"],
                strict=True,
            )
        ]

    @staticmethod
    def to_transactions(df: pd.DataFrame, date_format: str) -> list[Transaction]:
        """Build transactions from InvestmentId, Type, Date, Value."""
        types = [CSVUtils.parse_transaction_type(t) for t in df["Type"].str.strip()]
        dates = CSVUtils.parse_dates(df["Date"], date_format)
        values = CSVUtils.parse_floats(df["Value"], "Value")
        return [
            Transaction(investment_id=investment_id, type=kind, date=day, value=value)
            for investment_id, kind, day, value in zip(
                df["InvestmentId"].str.strip(), types, dates, values, strict=True
            )
        ]

    @staticmethod
    def to_quotes(df: pd.DataFrame, date_format: str) -> list[Quote]:
        """Build quotes from ISIN, Date, PricePerShare."""
        dates = CSVUtils.parse_dates(df["Date"], date_format)
        prices = CSVUtils.parse_floats(df["PricePerShare"], "PricePerShare")
        return [
            Quote(id=security_id, date=day, price_per_share=price)
            for security_id, day, price in zip(df["ISIN"].str.strip(), dates, prices, strict=True)
        ]

    @staticmethod
    def parse_transaction_type(value: str) -> TransactionType:
        """Parse a transaction type label."""
        try:
            return TransactionType(value)
        except ValueError as e:
            raise DataError(f"Unknown transaction type: {value!r}") from e

    @staticmethod
    def parse_dates(column: pd.Series, date_format: str) -> list:
        """Parse a column of date strings into calendar dates."""
        try:
            parsed = pd.to_datetime(column.str.strip(), format=date_format)
        except (ValueError, TypeError) as e:
            raise DataError(f"Invalid date in column {column.name}: {e}") from e
        if parsed.isna().any():
            raise DataError(f"Missing date in column {column.name}")
        return list(parsed.dt.date)

    @staticmethod
    def parse_floats(column: pd.Series, column_name: str) -> list[float]:
        """Parse a column of numeric strings into floats."""
        try:
            parsed = pd.to_numeric(column.str.strip(), errors="raise")
        except (ValueError, TypeError) as e:
            raise DataError(f"Invalid number in column {column_name}: {e}") from e
        if parsed.isna().any():
            raise DataError(f"Missing number in column {column_name}")
        return [float(v) for v in parsed]
