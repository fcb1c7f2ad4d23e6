"""Domain services for account lookup."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import AccountAlreadyExistsError
from .models import Account, AccountCreateInput
from .repository import AccountRepository


class AccountService:
    """Resolves platform users; accounts are owned by the external auth provider."""

    def __init__(self, repository: AccountRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "AccountService":
        # Imported here to avoid a circular import with the repositories package.
        from wallet_service.infrastructure.database.repositories import SqlAccountRepository

        return cls(SqlAccountRepository(session))

    async def get_by_id(self, account_id: str) -> Account | None:
        return await self._repository.get_by_id(account_id)

    async def get_by_email(self, email: str) -> Account | None:
        return await self._repository.get_by_email(email.strip().lower())

    async def create_account(self, payload: AccountCreateInput) -> Account:
        email = payload.email.strip().lower()
        existing = await self._repository.get_by_email(email)
        if existing is not None:
            raise AccountAlreadyExistsError(f"Email already registered: {email}")

        return await self._repository.create_account(
            email=email,
            name=payload.name,
            is_active=payload.is_active,
        )
