"""Repository protocol for wallet operations."""

from __future__ import annotations

from typing import Protocol, Sequence

from wallet_service.db.models import Wallet as WalletModel, WalletTransaction as WalletTransactionModel


class WalletRepository(Protocol):
    async def get_wallet(self, user_id: str) -> WalletModel | None:
        ...

    async def get_or_create_wallet(self, user_id: str, currency: str) -> WalletModel:
        ...

    async def apply_delta(
        self,
        user_id: str,
        *,
        balance_delta_cents: int,
        earned_delta_cents: int,
        spent_delta_cents: int,
        guard_non_negative: bool,
    ) -> WalletModel | None:
        ...

    async def add_transaction(
        self,
        *,
        user_id: str,
        type: str,
        amount_cents: int,
        currency: str,
        status: str,
        description: str | None,
        related_user_id: str | None,
    ) -> WalletTransactionModel:
        ...

    async def list_transactions(self, user_id: str, limit: int) -> Sequence[WalletTransactionModel]:
        ...

    async def sum_transactions_by_type(self, user_id: str, status: str) -> Sequence[tuple[str, int, int]]:
        ...
