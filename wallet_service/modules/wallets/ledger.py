"""Balance effect of each transaction type.

Every ``TransactionType`` must appear in ``TRANSACTION_EFFECTS``; entries
with ``sign == 0`` are recorded in the history without touching the wallet.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple

from .models import TransactionType


class BalanceEffect(NamedTuple):
    sign: int
    feeds_earned: bool = False
    feeds_spent: bool = False

    @property
    def is_debit(self) -> bool:
        return self.sign < 0

    def deltas(self, amount_cents: int) -> tuple[int, int, int]:
        """Return ``(balance, total_earned, total_spent)`` deltas in cents."""
        return (
            self.sign * amount_cents,
            amount_cents if self.feeds_earned else 0,
            amount_cents if self.feeds_spent else 0,
        )


DEBIT = BalanceEffect(sign=-1, feeds_spent=True)
CREDIT = BalanceEffect(sign=1, feeds_earned=True)
NO_EFFECT = BalanceEffect(sign=0)

# REFUND and TRANSFER are settled outside the wallet.
TRANSACTION_EFFECTS: dict[TransactionType, BalanceEffect] = {
    TransactionType.SUBSCRIPTION_PAYMENT: DEBIT,
    TransactionType.WITHDRAWAL: DEBIT,
    TransactionType.DEPOSIT: CREDIT,
    TransactionType.REFUND: NO_EFFECT,
    TransactionType.TRANSFER: NO_EFFECT,
}


def _check_exhaustive(effects: dict[TransactionType, BalanceEffect]) -> None:
    missing = set(TransactionType) - set(effects)
    if missing:
        names = ", ".join(sorted(kind.value for kind in missing))
        raise RuntimeError(f"No balance effect declared for: {names}")


_check_exhaustive(TRANSACTION_EFFECTS)


def effect_for(kind: TransactionType) -> BalanceEffect:
    return TRANSACTION_EFFECTS[kind]


def replay(totals: Iterable[tuple[TransactionType, int]]) -> tuple[int, int, int]:
    """Fold ``(type, amount_cents)`` pairs into expected wallet figures."""
    balance = earned = spent = 0
    for kind, amount_cents in totals:
        d_balance, d_earned, d_spent = effect_for(kind).deltas(amount_cents)
        balance += d_balance
        earned += d_earned
        spent += d_spent
    return balance, earned, spent
