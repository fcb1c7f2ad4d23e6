"""Pydantic schemas used across the project."""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from wallet_service.modules.wallets.models import TransactionStatus, TransactionType

# Decimal in Python, a plain number in JSON.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class TokenData(BaseModel):
    user_id: Optional[str] = None
    email: Optional[str] = None


class AccountResponse(CamelModel):
    id: str
    email: str
    name: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None


class WalletResponse(CamelModel):
    id: str
    user_id: str
    balance: Money
    total_earned: Money
    total_spent: Money
    currency: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TransactionResponse(CamelModel):
    id: int
    user_id: str
    type: TransactionType
    amount: Money
    currency: str
    description: Optional[str] = None
    related_user_id: Optional[str] = None
    status: TransactionStatus
    created_at: Optional[datetime] = None


class TransactionCreateRequest(CamelModel):
    type: Optional[TransactionType] = None
    amount: Optional[Decimal] = Field(default=None, max_digits=14, decimal_places=2)
    description: Optional[str] = Field(default=None, max_length=255)
    related_user_id: Optional[str] = Field(default=None, max_length=36)


class WalletOverviewResponse(CamelModel):
    wallet: WalletResponse
    recent_transactions: list[TransactionResponse] = Field(default_factory=list)


class TransactionListResponse(CamelModel):
    transactions: list[TransactionResponse] = Field(default_factory=list)


class ReconciliationResponse(CamelModel):
    user_id: str
    consistent: bool
    transaction_count: int
    balance: Money
    expected_balance: Money
    total_earned: Money
    expected_total_earned: Money
    total_spent: Money
    expected_total_spent: Money


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
