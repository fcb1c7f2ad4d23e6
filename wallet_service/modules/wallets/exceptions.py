"""Wallet domain specific exceptions."""


class WalletError(Exception):
    """Base class for wallet ledger errors."""


class InvalidAmountError(WalletError):
    """Raised when an amount is missing, non-positive or finer than one cent."""


class InvalidTransactionTypeError(WalletError):
    """Raised when a transaction type is not part of the ledger vocabulary."""


class InsufficientBalanceError(WalletError):
    """Raised when a debit would drive the wallet balance below zero."""


class CounterpartyNotFoundError(WalletError):
    """Raised when the related user of a transaction does not exist."""
