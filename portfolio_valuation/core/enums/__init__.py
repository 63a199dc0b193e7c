"""
Core enumerations for the valuation library.

This module provides centralized enumerations for domain concepts
like investment types and transaction types.
"""

from .investment_types import InvestmentType
from .transaction_types import TransactionType

__all__ = ["InvestmentType", "TransactionType"]
