"""SQLAlchemy implementation of the account repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wallet_service.db.models import User as UserModel
from wallet_service.modules.accounts.models import Account
from wallet_service.modules.accounts.repository import AccountRepository


class SqlAccountRepository(AccountRepository):
    """Account repository backed by the ``users`` table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, account_id: str) -> Account | None:
        stmt = select(UserModel).where(UserModel.id == account_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model)

    async def get_by_email(self, email: str) -> Account | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model)

    async def create_account(
        self,
        *,
        email: str,
        name: str | None,
        is_active: bool,
    ) -> Account:
        model = UserModel(
            email=email,
            name=name,
            is_active=is_active,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: UserModel | None) -> Account | None:
        if model is None:
            return None
        return Account(
            id=str(model.id),
            email=model.email,
            is_active=bool(model.is_active),
            name=model.name,
            created_at=model.created_at,
        )
