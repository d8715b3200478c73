"""Repository protocol for wallet operations."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Protocol, Sequence

from karaworks.db.models import Wallet as WalletModel, WalletTransaction as WalletTransactionModel


class WalletRepository(Protocol):
    async def get_wallet(self, user_id: str) -> WalletModel | None:
        ...

    async def create_wallet(self, user_id: str) -> WalletModel:
        ...

    async def increment_balance(self, wallet_id: str, amount: Decimal) -> WalletModel:
        ...

    async def add_transaction(
        self,
        *,
        wallet_id: str,
        amount: Decimal,
        event_id: str | None,
        withdraw_id: str | None,
        transaction_date: datetime,
    ) -> WalletTransactionModel:
        ...

    async def list_transactions_for_user(
        self, user_id: str, limit: int, offset: int
    ) -> Sequence[WalletTransactionModel]:
        ...

    async def list_transactions_for_event(self, event_id: str) -> Sequence[WalletTransactionModel]:
        ...

    async def list_transactions(self, limit: int, offset: int) -> Sequence[WalletTransactionModel]:
        ...

    async def count_transactions(self) -> int:
        ...

    async def list_transactions_for_hotel(self, hotel_id: str) -> Sequence[WalletTransactionModel]:
        ...

    async def list_transactions_between(self, start: datetime, end: datetime) -> Sequence[WalletTransactionModel]:
        """Entries with ``start <= transaction_date < end``."""
        ...
