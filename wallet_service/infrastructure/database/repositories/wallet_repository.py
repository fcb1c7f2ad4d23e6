"""SQLAlchemy implementation for wallet domain"""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import desc, func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from wallet_service.db.models import Wallet, WalletTransaction, generate_uuid

_UPSERT_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": pg_insert,
}


class SqlWalletRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_wallet(self, user_id: str) -> Wallet | None:
        stmt = (
            select(Wallet)
            .where(Wallet.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_or_create_wallet(self, user_id: str, currency: str) -> Wallet:
        values = {
            "id": generate_uuid(),
            "user_id": user_id,
            "currency": currency,
            "balance_cents": 0,
            "total_earned_cents": 0,
            "total_spent_cents": 0,
        }
        insert_fn = _UPSERT_INSERTS.get(self.session.get_bind().dialect.name)
        if insert_fn is not None:
            stmt = insert_fn(Wallet).values(**values).on_conflict_do_nothing(index_elements=["user_id"])
            await self.session.execute(stmt)
        else:
            try:
                async with self.session.begin_nested():
                    self.session.add(Wallet(**values))
            except IntegrityError:
                # Another request created the wallet first; the read below returns it.
                pass

        wallet = await self.get_wallet(user_id)
        if wallet is None:
            raise RuntimeError(f"Wallet for user {user_id} could not be created")
        return wallet

    async def apply_delta(
        self,
        user_id: str,
        *,
        balance_delta_cents: int,
        earned_delta_cents: int,
        spent_delta_cents: int,
        guard_non_negative: bool,
    ) -> Wallet | None:
        stmt = (
            update(Wallet)
            .where(Wallet.user_id == user_id)
            .values(
                balance_cents=Wallet.balance_cents + balance_delta_cents,
                total_earned_cents=Wallet.total_earned_cents + earned_delta_cents,
                total_spent_cents=Wallet.total_spent_cents + spent_delta_cents,
            )
        )
        if guard_non_negative:
            # Balance check and debit form a single statement.
            stmt = stmt.where(Wallet.balance_cents + balance_delta_cents >= 0)
        stmt = stmt.returning(Wallet.id).execution_options(synchronize_session=False)

        result = await self.session.execute(stmt)
        if result.scalar_one_or_none() is None:
            return None
        return await self.get_wallet(user_id)

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
    ) -> WalletTransaction:
        tx = WalletTransaction(
            user_id=user_id,
            type=type,
            amount_cents=amount_cents,
            currency=currency,
            status=status,
            description=description,
            related_user_id=related_user_id,
        )
        self.session.add(tx)
        await self.session.flush()
        await self.session.refresh(tx)
        return tx

    async def list_transactions(self, user_id: str, limit: int) -> Sequence[WalletTransaction]:
        stmt = (
            select(WalletTransaction)
            .where(WalletTransaction.user_id == user_id)
            .order_by(desc(WalletTransaction.created_at), desc(WalletTransaction.id))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def sum_transactions_by_type(self, user_id: str, status: str) -> Sequence[tuple[str, int, int]]:
        stmt = (
            select(
                WalletTransaction.type,
                func.coalesce(func.sum(WalletTransaction.amount_cents), 0),
                func.count(WalletTransaction.id),
            )
            .where(WalletTransaction.user_id == user_id, WalletTransaction.status == status)
            .group_by(WalletTransaction.type)
        )
        result = await self.session.execute(stmt)
        return [(row[0], int(row[1]), int(row[2])) for row in result.all()]
