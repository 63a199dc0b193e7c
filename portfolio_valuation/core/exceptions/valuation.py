"""
Custom exception hierarchy for the portfolio valuation library.

This module defines domain-specific exceptions for better error handling.
"""


class PortfolioException(Exception):
    """Base exception for all portfolio valuation errors."""

    pass


class ValidationError(PortfolioException):
    """Raised when input validation fails."""

    pass


class InvalidConstructionError(ValidationError):
    """Raised when a calculator or record store is built from an absent dataset."""

    def __init__(self, argument_name: str):
        self.argument_name = argument_name
        super().__init__(f"Dataset '{argument_name}' must not be None")


class DataError(PortfolioException):
    """Raised when data access or processing fails."""

    pass


class ConfigurationError(PortfolioException):
    """Raised when configuration is invalid."""

    pass
