"""
Quote domain model.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class Quote:
    """Price observation of one security on one date."""

    id: str
    date: date
    price_per_share: float
