"""Wallet related dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from wallet_service.core.config import get_settings
from wallet_service.modules.wallets import WalletService

from .database import get_db_session


def get_wallet_service(db: AsyncSession = Depends(get_db_session)) -> WalletService:
    return WalletService.with_session(db, get_settings().wallet)


__all__ = [
    "get_wallet_service",
]
