# =============================================================================
# tests/test_ledger.py - Balance Effects, Money, Tokens and Settings Tests
# =============================================================================

from decimal import Decimal

import pytest
from fastapi import HTTPException
from jose import jwt

from wallet_service.core.config import Settings
from wallet_service.core.security import create_access_token, decode_access_token
from wallet_service.modules.wallets import InvalidAmountError, TransactionType
from wallet_service.modules.wallets.ledger import (
    CREDIT,
    DEBIT,
    NO_EFFECT,
    TRANSACTION_EFFECTS,
    _check_exhaustive,
    effect_for,
    replay,
)
from wallet_service.modules.wallets.money import from_cents, to_cents


class TestBalanceEffects:
    """Tests for the transaction type to balance effect table."""

    def test_every_type_has_an_effect(self):
        assert set(TRANSACTION_EFFECTS) == set(TransactionType)

    def test_missing_type_fails_loudly(self):
        partial = dict(TRANSACTION_EFFECTS)
        del partial[TransactionType.REFUND]

        with pytest.raises(RuntimeError, match="REFUND"):
            _check_exhaustive(partial)

    @pytest.mark.parametrize(
        "kind, effect",
        [
            (TransactionType.SUBSCRIPTION_PAYMENT, DEBIT),
            (TransactionType.WITHDRAWAL, DEBIT),
            (TransactionType.DEPOSIT, CREDIT),
            (TransactionType.REFUND, NO_EFFECT),
            (TransactionType.TRANSFER, NO_EFFECT),
        ],
    )
    def test_mapping(self, kind, effect):
        assert effect_for(kind) == effect

    def test_deltas(self):
        assert DEBIT.deltas(999) == (-999, 0, 999)
        assert CREDIT.deltas(5000) == (5000, 5000, 0)
        assert NO_EFFECT.deltas(100) == (0, 0, 0)
        assert DEBIT.is_debit and not CREDIT.is_debit and not NO_EFFECT.is_debit

    def test_replay(self):
        totals = [
            (TransactionType.DEPOSIT, 5000),
            (TransactionType.SUBSCRIPTION_PAYMENT, 999),
            (TransactionType.REFUND, 999),
        ]

        assert replay(totals) == (4001, 5000, 999)
        assert replay([]) == (0, 0, 0)


class TestMoney:
    """Tests for decimal amount and cents conversion."""

    @pytest.mark.parametrize(
        "amount, cents",
        [
            (Decimal("50.00"), 5000),
            ("9.99", 999),
            (40, 4000),
            (0.1, 10),
            ("0.01", 1),
        ],
    )
    def test_to_cents(self, amount, cents):
        assert to_cents(amount) == cents

    @pytest.mark.parametrize("amount", [None, 0, "-3", "0.001", "1e-3", "inf", "x", False])
    def test_to_cents_rejects(self, amount):
        with pytest.raises(InvalidAmountError):
            to_cents(amount)

    def test_from_cents_keeps_two_places(self):
        assert str(from_cents(4001)) == "40.01"
        assert str(from_cents(0)) == "0.00"
        assert from_cents(-150) == Decimal("-1.50")


class TestAccessTokens:
    """Tests for bearer token round trips with the configured secret."""

    def test_token_carries_user_and_email(self):
        token_data = decode_access_token(create_access_token("user-1", "fan@example.com"))

        assert token_data.user_id == "user-1"
        assert token_data.email == "fan@example.com"

    def test_token_signed_with_other_secret_is_rejected(self):
        token = jwt.encode({"sub": "user-1"}, "some-other-secret", algorithm="HS256")

        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(token)

        assert exc_info.value.status_code == 401


class TestSettings:
    """Tests for nested settings read from the environment."""

    def test_server_section_from_environment(self, monkeypatch):
        monkeypatch.setenv("SERVER__PORT", "9100")
        monkeypatch.setenv("SERVER__RELOAD", "true")

        settings = Settings()

        assert settings.port == 9100
        assert settings.host == "0.0.0.0"
        assert settings.server.reload is True

    def test_debug_forces_debug_log_level(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")

        assert Settings().log_level == "DEBUG"
