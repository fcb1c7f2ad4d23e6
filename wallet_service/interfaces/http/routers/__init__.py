from fastapi import APIRouter

from . import accounts, wallet


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(accounts.router, tags=["accounts"])
    router.include_router(wallet.router, prefix="/wallet", tags=["wallet"])
    return router


__all__ = [
    "create_api_router",
]
