"""Domain modules and shared exports."""

from . import accounts, wallets

__all__ = [
    "accounts",
    "wallets",
]
