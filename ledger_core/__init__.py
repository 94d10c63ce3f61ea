"""
Ledger Core

A minimal in-memory ledger: customers, accounts and monetary movements
(deposit, withdrawal, transfer) with non-negative balances, integer minor
units and an append-only transaction history per account.
"""

__version__ = "1.0.0"
