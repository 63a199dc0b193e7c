"""
CSV Data Validation utilities.

This module validates portfolio file paths and CSV structure before records are built.
"""

from pathlib import Path

import pandas as pd

from portfolio_valuation.core.constants import CSV_EXTENSION
from portfolio_valuation.core.exceptions.valuation import DataError, ValidationError


class CSVValidator:
    """Handles validation of portfolio CSV files."""

    @staticmethod
    def validate_file_path(file_path: str | Path | None, param_name: str) -> Path:
        """Validate that a path names an existing .csv file.

        Raises:
            ValidationError: If the path is empty, has another extension or does not exist
        """
        if file_path is None or not str(file_path).strip():
            raise ValidationError(f"{param_name} cannot be empty")

        path = Path(file_path)
        if path.suffix != CSV_EXTENSION:
            raise ValidationError(f"{param_name} must be a {CSV_EXTENSION} file: {path.name}")

        if not path.is_file():
            raise ValidationError(f"{param_name} not found: {path}")

        return path

    @staticmethod
    def validate_csv_columns(
        df: pd.DataFrame, expected_columns: list[str], file_path: Path
    ) -> None:
        """Validate CSV file has the expected header."""
        missing_columns = [c for c in expected_columns if c not in df.columns]
        if missing_columns:
            raise DataError(f"CSV file {file_path.name} missing columns: {missing_columns}")

    @staticmethod
    def validate_field_count(
        df: pd.DataFrame, expected_columns: list[str], file_path: Path
    ) -> None:
        """Validate CSV rows carry at least as many fields as expected."""
        if len(df.columns) < len(expected_columns):
            raise DataError(
                f"CSV file {file_path.name} has {len(df.columns)} fields per row, "
                f"expected {len(expected_columns)}"
            )

    @staticmethod
    def validate_complete_rows(df: pd.DataFrame, file_path: Path) -> None:
        """Validate no row is shorter than the header."""
        incomplete = df.index[df.isna().any(axis=1)]
        if len(incomplete):
            # +2: one-based line numbers after the header row
            raise DataError(
                f"CSV file {file_path.name} line {incomplete[0] + 2} is missing fields"
            )
