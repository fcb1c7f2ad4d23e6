"""Wallet endpoints: balance with recent history, and transaction recording."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from wallet_service.core.security import get_current_account
from wallet_service.interfaces.http.deps import get_db_session, get_wallet_service
from wallet_service.modules.accounts import Account as AccountDomain
from wallet_service.modules.wallets import (
    CounterpartyNotFoundError,
    InsufficientBalanceError,
    InvalidAmountError,
    InvalidTransactionTypeError,
    WalletService,
)
from wallet_service.modules.wallets.money import from_cents
from wallet_service.schemas import (
    ReconciliationResponse,
    TransactionCreateRequest,
    TransactionListResponse,
    TransactionResponse,
    WalletOverviewResponse,
    WalletResponse,
)

router = APIRouter()


@router.get("", response_model=WalletOverviewResponse, summary="Get wallet with recent transactions")
async def get_wallet(
    limit: Optional[int] = Query(default=None, ge=1),
    account: AccountDomain = Depends(get_current_account),
    db: AsyncSession = Depends(get_db_session),
    service: WalletService = Depends(get_wallet_service),
) -> WalletOverviewResponse:
    overview = await service.get_wallet_overview(account.id, limit)
    await db.commit()
    return WalletOverviewResponse(
        wallet=WalletResponse.model_validate(overview.wallet),
        recent_transactions=[TransactionResponse.model_validate(tx) for tx in overview.recent_transactions],
    )


@router.post(
    "",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a transaction against the caller's wallet",
)
async def create_transaction(
    payload: TransactionCreateRequest,
    account: AccountDomain = Depends(get_current_account),
    db: AsyncSession = Depends(get_db_session),
    service: WalletService = Depends(get_wallet_service),
) -> TransactionResponse:
    # A zero amount counts as absent.
    if payload.type is None or not payload.amount:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Type and amount are required")

    try:
        record = await service.record_transaction(
            account.id,
            payload.type,
            payload.amount,
            description=payload.description,
            related_user_id=payload.related_user_id,
        )
    except InsufficientBalanceError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except CounterpartyNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except (InvalidAmountError, InvalidTransactionTypeError) as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

    await db.commit()
    return TransactionResponse.model_validate(record)


@router.get("/transactions", response_model=TransactionListResponse, summary="List recent transactions")
async def list_transactions(
    limit: Optional[int] = Query(default=None, ge=1),
    account: AccountDomain = Depends(get_current_account),
    service: WalletService = Depends(get_wallet_service),
) -> TransactionListResponse:
    records = await service.list_recent_transactions(account.id, limit)
    return TransactionListResponse(transactions=[TransactionResponse.model_validate(tx) for tx in records])


@router.get(
    "/reconciliation",
    response_model=ReconciliationResponse,
    summary="Compare the stored balance with the transaction history",
)
async def reconcile_wallet(
    account: AccountDomain = Depends(get_current_account),
    db: AsyncSession = Depends(get_db_session),
    service: WalletService = Depends(get_wallet_service),
) -> ReconciliationResponse:
    report = await service.reconcile(account.id)
    await db.commit()
    return ReconciliationResponse(
        user_id=report.user_id,
        consistent=report.consistent,
        transaction_count=report.transaction_count,
        balance=from_cents(report.balance_cents),
        expected_balance=from_cents(report.expected_balance_cents),
        total_earned=from_cents(report.total_earned_cents),
        expected_total_earned=from_cents(report.expected_total_earned_cents),
        total_spent=from_cents(report.total_spent_cents),
        expected_total_spent=from_cents(report.expected_total_spent_cents),
    )
