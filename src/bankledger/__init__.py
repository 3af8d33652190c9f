"""Minimal banking ledger: accounts, authentication and atomic funds transfer."""

__version__ = "0.1.0"
