"""SQLAlchemy-backed repository implementations."""

from .account_repository import SqlAccountRepository
from .wallet_repository import SqlWalletRepository

__all__ = [
    "SqlAccountRepository",
    "SqlWalletRepository",
]
