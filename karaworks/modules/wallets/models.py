"""Domain models for wallet operations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(slots=True)
class WalletSnapshot:
    # None until the first credit or registration creates the row
    id: Optional[str]
    user_id: str
    balance: Decimal
    updated_at: Optional[datetime]


@dataclass(slots=True)
class WalletTransactionRecord:
    id: str
    wallet_id: str
    event_id: Optional[str]
    withdraw_id: Optional[str]
    amount: Decimal
    transaction_date: Optional[datetime]
    created_at: Optional[datetime]


@dataclass(slots=True)
class WalletCredit:
    wallet: WalletSnapshot
    transaction: WalletTransactionRecord
