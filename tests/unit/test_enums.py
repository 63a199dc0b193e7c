"""
Unit tests for core enumerations.
"""

import pytest

from portfolio_valuation.core.enums import InvestmentType, TransactionType


class TestInvestmentType:
    """Tests for InvestmentType."""

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("Stock", InvestmentType.STOCK),
            ("Fonds", InvestmentType.FONDS),
            ("RealEstate", InvestmentType.REAL_ESTATE),
        ],
    )
    def test_should_parse_dataset_labels(self, label, expected) -> None:
        """Test enum values match the dataset labels."""
        assert InvestmentType(label) is expected

    def test_should_expose_asset_class_flags(self) -> None:
        """Test exactly one flag holds per type."""
        assert InvestmentType.STOCK.is_stock
        assert InvestmentType.FONDS.is_fund
        assert InvestmentType.REAL_ESTATE.is_real_estate
        assert not InvestmentType.FONDS.is_stock


class TestTransactionType:
    """Tests for TransactionType."""

    def test_should_parse_dataset_labels(self) -> None:
        """Test enum values match the dataset labels."""
        assert [t.value for t in TransactionType] == ["Shares", "Percentage", "Estate", "Building"]

    def test_should_reject_unknown_label(self) -> None:
        """Test unknown labels are rejected."""
        with pytest.raises(ValueError):
            TransactionType("Dividend")
