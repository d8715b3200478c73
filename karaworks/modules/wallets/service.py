"""Wallet domain service"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.db.models import Wallet as WalletModel, WalletTransaction as WalletTransactionModel
from karaworks.infrastructure.database.repositories.wallet_repository import SqlWalletRepository

from .exceptions import InvalidCreditError
from .models import WalletCredit, WalletSnapshot, WalletTransactionRecord
from .repository import WalletRepository

logger = logging.getLogger(__name__)


def month_bounds(year: int, month: int) -> tuple[datetime, datetime]:
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12: {month}")
    start = datetime(year, month, 1, tzinfo=timezone.utc)
    if month == 12:
        return start, datetime(year + 1, 1, 1, tzinfo=timezone.utc)
    return start, datetime(year, month + 1, 1, tzinfo=timezone.utc)


@dataclass(slots=True)
class WalletService:
    repository: WalletRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "WalletService":
        return cls(SqlWalletRepository(session))

    async def get_wallet(self, user_id: str) -> WalletSnapshot | None:
        wallet = await self.repository.get_wallet(user_id)
        return self._to_snapshot(wallet) if wallet else None

    async def wallet_view(self, user_id: str) -> WalletSnapshot:
        """Current balance without creating the wallet; zero when none exists yet."""
        wallet = await self.repository.get_wallet(user_id)
        if wallet is None:
            return WalletSnapshot(id=None, user_id=user_id, balance=Decimal("0"), updated_at=None)
        return self._to_snapshot(wallet)

    async def ensure_wallet(self, user_id: str) -> WalletSnapshot:
        wallet = await self._get_or_create(user_id)
        return self._to_snapshot(wallet)

    async def credit(
        self,
        *,
        user_id: str,
        amount: Decimal,
        event_id: str | None = None,
        withdraw_id: str | None = None,
        transaction_date: datetime | None = None,
    ) -> WalletCredit:
        """Add ``amount`` to the worker's wallet and append one ledger entry.

        The wallet is created with a zero balance on first credit. Exactly one
        of ``event_id`` / ``withdraw_id`` names the origin of the money.
        """
        if amount < 0:
            raise InvalidCreditError(f"Credit amount must not be negative: {amount}")
        if (event_id is None) == (withdraw_id is None):
            raise InvalidCreditError("A credit must reference exactly one of event or withdraw")

        wallet = await self._get_or_create(user_id)
        wallet = await self.repository.increment_balance(wallet.id, amount)
        transaction = await self.repository.add_transaction(
            wallet_id=wallet.id,
            amount=amount,
            event_id=event_id,
            withdraw_id=withdraw_id,
            transaction_date=transaction_date or datetime.now(timezone.utc),
        )
        logger.info("Credited %s to wallet %s (user %s)", amount, wallet.id, user_id)
        return WalletCredit(
            wallet=self._to_snapshot(wallet),
            transaction=self._to_transaction(transaction),
        )

    async def list_transactions_for_user(
        self, user_id: str, limit: int = 20, offset: int = 0
    ) -> list[WalletTransactionRecord]:
        rows = await self.repository.list_transactions_for_user(user_id, limit, offset)
        return [self._to_transaction(row) for row in rows]

    async def list_transactions_for_event(self, event_id: str) -> list[WalletTransactionRecord]:
        rows = await self.repository.list_transactions_for_event(event_id)
        return [self._to_transaction(row) for row in rows]

    async def list_transactions(self, limit: int = 20, offset: int = 0) -> tuple[list[WalletTransactionRecord], int]:
        rows = await self.repository.list_transactions(limit, offset)
        total = await self.repository.count_transactions()
        return [self._to_transaction(row) for row in rows], total

    async def list_transactions_for_hotel(self, hotel_id: str) -> list[WalletTransactionRecord]:
        rows = await self.repository.list_transactions_for_hotel(hotel_id)
        return [self._to_transaction(row) for row in rows]

    async def list_transactions_for_month(
        self, year: int, month: int
    ) -> tuple[list[WalletTransactionRecord], datetime, datetime]:
        """Entries dated inside the calendar month (UTC).

        Returns the records with the inclusive start and end of the month.
        """
        start, next_start = month_bounds(year, month)
        rows = await self.repository.list_transactions_between(start, next_start)
        return [self._to_transaction(row) for row in rows], start, next_start - timedelta(microseconds=1)

    async def _get_or_create(self, user_id: str) -> WalletModel:
        wallet = await self.repository.get_wallet(user_id)
        if wallet is None:
            logger.info("Creating wallet for user %s", user_id)
            wallet = await self.repository.create_wallet(user_id)
        return wallet

    @staticmethod
    def _to_snapshot(model: WalletModel) -> WalletSnapshot:
        return WalletSnapshot(
            id=model.id,
            user_id=model.user_id,
            balance=Decimal(model.balance),
            updated_at=model.updated_at,
        )

    @staticmethod
    def _to_transaction(model: WalletTransactionModel) -> WalletTransactionRecord:
        return WalletTransactionRecord(
            id=model.id,
            wallet_id=model.wallet_id,
            event_id=model.event_id,
            withdraw_id=model.withdraw_id,
            amount=Decimal(model.amount),
            transaction_date=model.transaction_date,
            created_at=model.created_at,
        )
