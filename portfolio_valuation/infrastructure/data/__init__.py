"""
Data loading infrastructure.

This module provides loading of portfolio datasets from CSV files.
"""

from .csv_config import CSVReaderConfig
from .csv_portfolio_reader import CSVPortfolioReader

__all__ = ["CSVPortfolioReader", "CSVReaderConfig"]
