"""
CSV reader configuration.
"""

from dataclasses import dataclass

from portfolio_valuation.core.constants import CSV_DATE_FORMAT, CSV_DELIMITER, CSV_ENCODING
from portfolio_valuation.core.exceptions.valuation import ConfigurationError


@dataclass(frozen=True)
class CSVReaderConfig:
    """Settings shared by all three portfolio CSV files.

    When ``validate_headers`` is off the header row is still skipped, but
    columns are matched by position instead of by name.
    """

    delimiter: str = CSV_DELIMITER
    validate_headers: bool = True
    encoding: str = CSV_ENCODING
    date_format: str = CSV_DATE_FORMAT
    chunk_size: int = 10_000

    def __post_init__(self) -> None:
        if not self.delimiter:
            raise ConfigurationError("CSV delimiter cannot be empty")
        if self.chunk_size <= 0:
            raise ConfigurationError(f"chunk_size must be positive, got {self.chunk_size}")
