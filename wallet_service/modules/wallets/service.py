"""Wallet ledger service.

Applies monetary movements to a user's wallet and exposes the balance with
its recent history. The balance check for debits and the debit itself run as
a single conditional update, so two concurrent payments cannot both pass the
check against the same funds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from wallet_service.core.config import WalletSettings, get_settings
from wallet_service.db.models import Wallet as WalletModel, WalletTransaction as WalletTransactionModel
from wallet_service.modules.accounts.repository import AccountRepository

from .exceptions import CounterpartyNotFoundError, InsufficientBalanceError, InvalidTransactionTypeError
from .ledger import effect_for, replay
from .models import (
    LedgerReconciliation,
    TransactionStatus,
    TransactionType,
    WalletOverview,
    WalletSnapshot,
    WalletTransactionRecord,
)
from .money import from_cents, to_cents
from .repository import WalletRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class WalletService:
    repository: WalletRepository
    accounts: AccountRepository
    settings: WalletSettings

    @classmethod
    def with_session(cls, session: AsyncSession, settings: Optional[WalletSettings] = None) -> "WalletService":
        # Imported here to avoid a circular import with the repositories package.
        from wallet_service.infrastructure.database.repositories import SqlAccountRepository, SqlWalletRepository

        return cls(
            SqlWalletRepository(session),
            SqlAccountRepository(session),
            settings or get_settings().wallet,
        )

    async def get_or_create_wallet(self, user_id: str) -> WalletSnapshot:
        existing = await self.repository.get_wallet(user_id)
        if existing is not None:
            return self._to_snapshot(existing)
        wallet = await self.repository.get_or_create_wallet(user_id, self.settings.currency)
        logger.info("Wallet %s ready for user %s", wallet.id, user_id)
        return self._to_snapshot(wallet)

    async def record_transaction(
        self,
        user_id: str,
        type: TransactionType | str,
        amount: Decimal | int | str,
        description: Optional[str] = None,
        related_user_id: Optional[str] = None,
    ) -> WalletTransactionRecord:
        kind = self._parse_type(type)
        amount_cents = to_cents(amount)

        if related_user_id:
            counterparty = await self.accounts.get_by_id(related_user_id)
            if counterparty is None:
                raise CounterpartyNotFoundError(f"Related user not found: {related_user_id}")

        wallet = await self.get_or_create_wallet(user_id)
        currency = wallet.currency
        balance_cents = wallet.balance_cents

        effect = effect_for(kind)
        if effect.sign != 0:
            balance_delta, earned_delta, spent_delta = effect.deltas(amount_cents)
            updated = await self.repository.apply_delta(
                user_id,
                balance_delta_cents=balance_delta,
                earned_delta_cents=earned_delta,
                spent_delta_cents=spent_delta,
                guard_non_negative=effect.is_debit,
            )
            if updated is None:
                logger.warning(
                    "Rejected %s of %s for user %s: insufficient balance",
                    kind.value,
                    from_cents(amount_cents),
                    user_id,
                )
                raise InsufficientBalanceError("Insufficient balance")
            balance_cents = updated.balance_cents

        tx = await self.repository.add_transaction(
            user_id=user_id,
            type=kind.value,
            amount_cents=amount_cents,
            currency=currency,
            status=TransactionStatus.COMPLETED.value,
            description=description or None,
            related_user_id=related_user_id or None,
        )
        logger.info(
            "Recorded %s #%s of %s %s for user %s (balance %s)",
            kind.value,
            tx.id,
            from_cents(amount_cents),
            currency,
            user_id,
            from_cents(balance_cents),
        )
        return self._to_transaction(tx)

    async def list_recent_transactions(self, user_id: str, limit: Optional[int] = None) -> list[WalletTransactionRecord]:
        rows = await self.repository.list_transactions(user_id, self._clamp_limit(limit))
        return [self._to_transaction(row) for row in rows]

    async def get_wallet_overview(self, user_id: str, limit: Optional[int] = None) -> WalletOverview:
        wallet = await self.get_or_create_wallet(user_id)
        transactions = await self.list_recent_transactions(user_id, limit)
        return WalletOverview(wallet=wallet, recent_transactions=transactions)

    async def reconcile(self, user_id: str) -> LedgerReconciliation:
        """Replay completed transactions and compare them with the stored wallet."""
        wallet = await self.get_or_create_wallet(user_id)
        rows = await self.repository.sum_transactions_by_type(user_id, TransactionStatus.COMPLETED.value)

        totals = []
        count = 0
        for type_value, amount_cents, row_count in rows:
            totals.append((self._parse_type(type_value), amount_cents))
            count += row_count
        expected_balance, expected_earned, expected_spent = replay(totals)

        report = LedgerReconciliation(
            user_id=user_id,
            transaction_count=count,
            balance_cents=wallet.balance_cents,
            expected_balance_cents=expected_balance,
            total_earned_cents=wallet.total_earned_cents,
            expected_total_earned_cents=expected_earned,
            total_spent_cents=wallet.total_spent_cents,
            expected_total_spent_cents=expected_spent,
        )
        if not report.consistent:
            logger.error(
                "Ledger mismatch for user %s: balance %s, ledger %s",
                user_id,
                from_cents(report.balance_cents),
                from_cents(report.expected_balance_cents),
            )
        return report

    def _clamp_limit(self, limit: Optional[int]) -> int:
        if limit is None:
            limit = self.settings.recent_transactions_limit
        return max(1, min(limit, self.settings.max_transactions_limit))

    @staticmethod
    def _parse_type(value: TransactionType | str) -> TransactionType:
        if isinstance(value, TransactionType):
            return value
        try:
            return TransactionType(value)
        except ValueError as exc:
            raise InvalidTransactionTypeError(f"Unknown transaction type: {value!r}") from exc

    @staticmethod
    def _to_snapshot(model: WalletModel) -> WalletSnapshot:
        return WalletSnapshot(
            id=model.id,
            user_id=model.user_id,
            balance_cents=model.balance_cents,
            total_earned_cents=model.total_earned_cents,
            total_spent_cents=model.total_spent_cents,
            currency=model.currency,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _to_transaction(model: WalletTransactionModel) -> WalletTransactionRecord:
        return WalletTransactionRecord(
            id=model.id,
            user_id=model.user_id,
            type=TransactionType(model.type),
            amount_cents=model.amount_cents,
            currency=model.currency,
            status=TransactionStatus(model.status),
            description=model.description,
            related_user_id=model.related_user_id,
            created_at=model.created_at,
        )
