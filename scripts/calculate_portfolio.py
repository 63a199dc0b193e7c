#!/usr/bin/env python3
"""
Portfolio Value Calculator

Loads investments, transactions and quotes from CSV files and prints the
portfolio value for each "<date>;<investorId>" line entered.
"""

import sys

from portfolio_valuation.app.console import main

if __name__ == "__main__":
    sys.exit(main())
