"""
Shared fixtures: a small reference portfolio with two funds.

Investor0 holds three stocks, three properties and stakes in Fonds1 and
Fonds12. Investor1 holds a stock without an ISIN. Investor2 holds one property.
"""

from datetime import date
from pathlib import Path

import pytest

from portfolio_valuation.core.constants import (
    INVESTMENTS_FILE_NAME,
    QUOTES_FILE_NAME,
    TRANSACTIONS_FILE_NAME,
)
from portfolio_valuation.core.enums import InvestmentType, TransactionType
from portfolio_valuation.core.models.investment import Investment, create_investment
from portfolio_valuation.core.models.quote import Quote
from portfolio_valuation.core.models.transaction import Transaction

S = TransactionType.SHARES
P = TransactionType.PERCENTAGE
E = TransactionType.ESTATE
B = TransactionType.BUILDING


def _investments() -> list[Investment]:
    fund, stock, estate = InvestmentType.FONDS, InvestmentType.STOCK, InvestmentType.REAL_ESTATE
    return [
        create_investment("Investor0", "Investment44789", fund, fund_investor="Fonds1"),
        create_investment("Investor0", "Investment48878", fund, fund_investor="Fonds12"),
        create_investment("Fonds1", "Investment21900", stock, share_id="ISIN62"),
        create_investment("Fonds1", "Investment29522", estate, city="City4522"),
        create_investment("Fonds12", "Investment12550", stock, share_id="ISIN150"),
        create_investment("Fonds12", "Investment28930", estate, city="City3930"),
        create_investment("Investor0", "Investment5815", stock, share_id="ISIN26"),
        create_investment("Investor0", "Investment12407", stock, share_id="ISIN130"),
        create_investment("Investor0", "Investment22216", stock, share_id="ISIN153"),
        create_investment("Investor0", "Investment29478", estate, city="City4478"),
        create_investment("Investor0", "Investment27611", estate, city="City2611"),
        create_investment("Investor0", "Investment29173", estate, city="City4173"),
        create_investment("Investor1", "Investment23835", stock, fund_investor="ISIN117"),
        create_investment("Investor2", "Investment29481", estate, city="City4481"),
    ]


QUOTE_ROWS = [
    ("ISIN26", "2016-06-28", 98.2239),
    ("ISIN26", "2016-06-29", 98.1888),
    ("ISIN26", "2016-06-30", 98.642),
    ("ISIN26", "2016-07-01", 97.949),
    ("ISIN26", "2016-07-04", 98.1489),
    ("ISIN26", "2016-07-05", 99.5234),
    ("ISIN26", "2016-07-06", 99.5346),
    ("ISIN26", "2021-01-20", 104.8962),
    ("ISIN26", "2021-01-21", 105.6453),
    ("ISIN26", "2021-01-22", 105.1563),
    ("ISIN130", "2016-01-06", 6.16),
    ("ISIN130", "2016-01-07", 6.16),
    ("ISIN130", "2016-01-08", 6.17),
    ("ISIN130", "2016-01-11", 6.08),
    ("ISIN130", "2016-01-12", 6.11),
    ("ISIN130", "2021-07-19", 6.18),
    ("ISIN130", "2021-07-20", 17.57),
    ("ISIN130", "2021-01-21", 17.76),
    ("ISIN130", "2016-01-22", 17.75),
    ("ISIN130", "2016-01-25", 18.03),
    ("ISIN150", "2016-06-29", 104.31),
    ("ISIN150", "2016-06-30", 104.508),
    ("ISIN150", "2016-07-01", 105.088),
    ("ISIN150", "2019-10-24", 102.237),
    ("ISIN150", "2019-10-25", 102.034),
    ("ISIN62", "2016-06-28", 115.934),
    ("ISIN62", "2016-06-29", 115.926),
    ("ISIN62", "2016-06-30", 115.716),
    ("ISIN62", "2016-07-01", 115.943),
    ("ISIN62", "2016-07-04", 116.106),
    ("ISIN62", "2019-11-01", 125.0),
]

TRANSACTION_ROWS = [
    ("Investment44789", P, "2016-01-03", 0.0403),
    ("Investment44789", P, "2016-01-12", 0.008505),
    ("Investment44789", P, "2016-01-15", -0.005453),
    ("Investment44789", P, "2018-02-22", 0.01368),
    ("Investment44789", P, "2018-08-11", -0.015834),
    ("Investment48878", P, "2016-02-19", 0.0333),
    ("Investment48878", P, "2016-02-22", 0.013027),
    ("Investment48878", P, "2016-04-14", -0.017632),
    ("Investment48878", P, "2016-11-11", 0.01014),
    ("Investment48878", P, "2016-11-24", 0.008283),
    ("Investment5815", S, "2016-07-06", 20.07),
    ("Investment5815", S, "2016-11-10", 3.15),
    ("Investment5815", S, "2017-09-02", 3.34),
    ("Investment5815", S, "2018-05-22", -1.73),
    ("Investment5815", S, "2018-06-19", 5.92),
    ("Investment12407", S, "2016-03-22", 58.0),
    ("Investment12407", S, "2016-07-23", 7.52),
    ("Investment12407", S, "2016-08-17", -5.68),
    ("Investment12407", S, "2020-01-01", 12.45),
    ("Investment12407", S, "2020-01-14", 26.15),
    ("Investment22216", P, "2016-04-04", 29.07),
    ("Investment22216", P, "2016-07-13", -1.84),
    ("Investment22216", P, "2017-02-06", 5.77),
    ("Investment22216", P, "2019-04-23", 5.08),
    ("Investment22216", P, "2019-12-12", 9.86),
    ("Investment29478", E, "2018-02-09", 347060.0),
    ("Investment29478", B, "2018-02-09", 1948682.0),
    ("Investment27611", E, "2017-05-10", 340690.0),
    ("Investment27611", E, "2017-11-27", 2020.0),
    ("Investment27611", B, "2017-05-10", 152937.0),
    ("Investment27611", B, "2017-11-27", 909.0),
    ("Investment29173", E, "2017-08-06", 339853.0),
    ("Investment29173", E, "2020-02-15", -209.0),
    ("Investment29173", B, "2017-08-06", 291572.0),
    ("Investment29173", B, "2020-02-15", -629.0),
    ("Investment23835", S, "2016-07-10", 12.08),
    ("Investment23835", S, "2016-07-13", -6.22),
    ("Investment23835", S, "2016-11-21", 4.59),
    ("Investment23835", S, "2018-09-26", 4.8),
    ("Investment23835", S, "2019-01-11", -1.85),
    ("Investment29481", E, "2016-12-20", 255748.0),
    ("Investment29481", E, "2020-04-22", 13.0),
    ("Investment29481", B, "2016-12-20", 288439.0),
    ("Investment29481", B, "2020-04-22", 1425.0),
    ("Investment21900", S, "2016-10-09", 16.29),
    ("Investment21900", S, "2017-09-11", 2.63),
    ("Investment21900", S, "2017-10-11", -2.85),
    ("Investment21900", S, "2019-06-08", -4.34),
    ("Investment21900", S, "2019-06-15", -5.33),
    ("Investment12550", S, "2016-11-28", 23.67),
    ("Investment12550", S, "2018-04-16", -0.27),
    ("Investment12550", S, "2018-05-22", -2.11),
    ("Investment12550", S, "2018-09-05", 6.67),
    ("Investment12550", S, "2019-08-20", 8.94),
    ("Investment29522", E, "2017-10-12", 215559.0),
    ("Investment29522", E, "2018-08-15", -2043.0),
    ("Investment29522", B, "2017-10-12", 1476211.0),
    ("Investment29522", B, "2018-08-15", -14118.0),
    ("Investment28930", E, "2016-04-15", 825550.0),
    ("Investment28930", E, "2017-02-05", 3207.0),
    ("Investment28930", E, "2018-10-15", -3100.0),
    ("Investment28930", B, "2016-04-15", 1419683.0),
    ("Investment28930", B, "2017-02-05", -5020.0),
    ("Investment28930", B, "2018-10-15", -13632.0),
]


@pytest.fixture
def reference_investments() -> list[Investment]:
    """Investments of the reference portfolio."""
    return _investments()


@pytest.fixture
def reference_transactions() -> list[Transaction]:
    """Transactions of the reference portfolio."""
    return [
        Transaction(investment_id, kind, date.fromisoformat(day), value)
        for investment_id, kind, day, value in TRANSACTION_ROWS
    ]


@pytest.fixture
def reference_quotes() -> list[Quote]:
    """Quotes of the reference portfolio."""
    return [Quote(isin, date.fromisoformat(day), price) for isin, day, price in QUOTE_ROWS]


def _write_csv(path: Path, header: str, rows: list[tuple]) -> None:
    lines = [header] + [";".join(str(field) for field in row) for row in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


@pytest.fixture
def reference_data_dir(tmp_path: Path, reference_investments) -> Path:
    """The reference portfolio written as semicolon-separated files."""
    _write_csv(
        tmp_path / INVESTMENTS_FILE_NAME,
        "InvestorId;InvestmentId;InvestmentType;ISIN;City;FondsInvestor",
        [
            (
                investment.investor_id,
                investment.investment_id,
                investment.investment_type,
                getattr(investment, "share_id", ""),
                getattr(investment, "city", ""),
                getattr(investment, "fund_investor", ""),
            )
            for investment in reference_investments
        ],
    )
    _write_csv(
        tmp_path / TRANSACTIONS_FILE_NAME,
        "InvestmentId;Type;Date;Value",
        [
            (investment_id, kind, day, repr(value))
            for investment_id, kind, day, value in TRANSACTION_ROWS
        ],
    )
    _write_csv(
        tmp_path / QUOTES_FILE_NAME,
        "ISIN;Date;PricePerShare",
        [(isin, day, repr(price)) for isin, day, price in QUOTE_ROWS],
    )
    return tmp_path
