"""Wallet ledger service for a subscription content platform."""

__version__ = "0.1.0"
