"""Wallet domain exports"""

from .exceptions import (
    CounterpartyNotFoundError,
    InsufficientBalanceError,
    InvalidAmountError,
    InvalidTransactionTypeError,
    WalletError,
)
from .models import (
    LedgerReconciliation,
    TransactionStatus,
    TransactionType,
    WalletOverview,
    WalletSnapshot,
    WalletTransactionRecord,
)
from .service import WalletService

__all__ = [
    "CounterpartyNotFoundError",
    "InsufficientBalanceError",
    "InvalidAmountError",
    "InvalidTransactionTypeError",
    "WalletError",
    "LedgerReconciliation",
    "TransactionStatus",
    "TransactionType",
    "WalletOverview",
    "WalletSnapshot",
    "WalletTransactionRecord",
    "WalletService",
]
