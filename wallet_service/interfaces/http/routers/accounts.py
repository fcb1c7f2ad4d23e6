"""Caller profile endpoint."""
from fastapi import APIRouter, Depends

from wallet_service.core.security import get_current_account
from wallet_service.modules.accounts import Account as AccountDomain
from wallet_service.schemas import AccountResponse

router = APIRouter()


@router.get("/me", response_model=AccountResponse, summary="Get the authenticated user")
async def current_account(account: AccountDomain = Depends(get_current_account)) -> AccountResponse:
    return AccountResponse.model_validate(account)
