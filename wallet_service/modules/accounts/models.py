"""Domain models for accounts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class Account:
    id: str
    email: str
    is_active: bool
    name: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class AccountCreateInput:
    email: str
    name: Optional[str] = None
    is_active: bool = True
