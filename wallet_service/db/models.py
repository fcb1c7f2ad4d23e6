"""SQLAlchemy ORM models."""
import uuid
from sqlalchemy import BigInteger, Boolean, Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from wallet_service.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(100))
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class Wallet(Base):
    __tablename__ = "wallets"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id"), unique=True, nullable=False)
    balance_cents = Column(BigInteger, nullable=False, default=0)
    total_earned_cents = Column(BigInteger, nullable=False, default=0)
    total_spent_cents = Column(BigInteger, nullable=False, default=0)
    currency = Column(String(10), nullable=False, default="EUR")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    user = relationship("User")


class WalletTransaction(Base):
    __tablename__ = "wallet_transactions"
    __table_args__ = (
        # Serves the per-user newest-first history query.
        Index("ix_wallet_transactions_user_created", "user_id", "created_at"),
    )

    # Integer sequence keeps ordering strict when timestamps collide.
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    type = Column(String(32), nullable=False)  # SUBSCRIPTION_PAYMENT, WITHDRAWAL, DEPOSIT, REFUND, TRANSFER
    amount_cents = Column(BigInteger, nullable=False)
    currency = Column(String(10), nullable=False, default="EUR")
    description = Column(String(255))
    related_user_id = Column(String(36), ForeignKey("users.id"), nullable=True)
    status = Column(String(20), nullable=False, default="COMPLETED")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", foreign_keys=[user_id])
    related_user = relationship("User", foreign_keys=[related_user_id])
