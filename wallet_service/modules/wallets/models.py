"""Domain models for wallet operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from .money import from_cents


class TransactionType(str, Enum):
    SUBSCRIPTION_PAYMENT = "SUBSCRIPTION_PAYMENT"
    WITHDRAWAL = "WITHDRAWAL"
    DEPOSIT = "DEPOSIT"
    REFUND = "REFUND"
    TRANSFER = "TRANSFER"


class TransactionStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"


@dataclass(slots=True)
class WalletSnapshot:
    id: str
    user_id: str
    balance_cents: int
    total_earned_cents: int
    total_spent_cents: int
    currency: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @property
    def balance(self) -> Decimal:
        return from_cents(self.balance_cents)

    @property
    def total_earned(self) -> Decimal:
        return from_cents(self.total_earned_cents)

    @property
    def total_spent(self) -> Decimal:
        return from_cents(self.total_spent_cents)


@dataclass(slots=True)
class WalletTransactionRecord:
    id: int
    user_id: str
    type: TransactionType
    amount_cents: int
    currency: str
    status: TransactionStatus
    description: Optional[str]
    related_user_id: Optional[str]
    created_at: Optional[datetime]

    @property
    def amount(self) -> Decimal:
        return from_cents(self.amount_cents)


@dataclass(slots=True)
class WalletOverview:
    wallet: WalletSnapshot
    recent_transactions: list[WalletTransactionRecord] = field(default_factory=list)


@dataclass(slots=True)
class LedgerReconciliation:
    """Stored wallet figures next to the figures replayed from the ledger."""

    user_id: str
    transaction_count: int
    balance_cents: int
    expected_balance_cents: int
    total_earned_cents: int
    expected_total_earned_cents: int
    total_spent_cents: int
    expected_total_spent_cents: int

    @property
    def consistent(self) -> bool:
        return (
            self.balance_cents == self.expected_balance_cents
            and self.total_earned_cents == self.expected_total_earned_cents
            and self.total_spent_cents == self.expected_total_spent_cents
        )
