"""
Portfolio valuation library.

Values investor portfolios of stocks, fund stakes and real estate as of an
arbitrary date.
"""

__version__ = "1.0.0"
