"""
Core constants and limits.

Defines library-wide defaults for data import and valuation.
"""

import os

# Data Import
IMPORT_FILES_DEFAULT_FOLDER_NAME = "DataToImport"
INVESTMENTS_FILE_NAME = "Investments.csv"
TRANSACTIONS_FILE_NAME = "Transactions.csv"
QUOTES_FILE_NAME = "Quotes.csv"
CSV_EXTENSION = ".csv"
CSV_DELIMITER = ";"
CSV_ENCODING = "utf-8"
CSV_DATE_FORMAT = "%Y-%m-%d"

# CSV Headers
INVESTMENT_COLUMNS = [
    "InvestorId",
    "InvestmentId",
    "InvestmentType",
    "ISIN",
    "City",
    "FondsInvestor",
]
TRANSACTION_COLUMNS = ["InvestmentId", "Type", "Date", "Value"]
QUOTE_COLUMNS = ["ISIN", "Date", "PricePerShare"]

# Valuation
PERCENT_SCALE = 100.0  # Fund ownership is recorded on a 0-100 scale
VALUE_TOLERANCE = 0.0001  # Tolerance used when comparing portfolio values

# Worker Pool
DEFAULT_MAX_WORKERS = max(1, (os.cpu_count() or 2) - 1)  # Leave one core for the caller
DEFAULT_PARALLEL_THRESHOLD = 64  # Investments per investor before fanning out
