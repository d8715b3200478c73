"""SQLAlchemy implementation for wallet domain"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Sequence

from sqlalchemy import desc, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.db.models import User, Wallet, WalletTransaction


class SqlWalletRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_wallet(self, user_id: str) -> Wallet | None:
        stmt = select(Wallet).where(Wallet.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def create_wallet(self, user_id: str) -> Wallet:
        wallet = Wallet(user_id=user_id, balance=Decimal("0"))
        try:
            # savepoint keeps the caller's transaction alive if another request created it first
            async with self.session.begin_nested():
                self.session.add(wallet)
        except IntegrityError:
            existing = await self.get_wallet(user_id)
            if existing is None:
                raise
            return existing
        return wallet

    async def increment_balance(self, wallet_id: str, amount: Decimal) -> Wallet:
        stmt = (
            update(Wallet)
            .where(Wallet.id == wallet_id)
            .values(balance=Wallet.balance + amount)
            .execution_options(synchronize_session="fetch", populate_existing=True)
            .returning(Wallet)
        )
        result = await self.session.execute(stmt)
        return result.scalars().one()

    async def add_transaction(
        self,
        *,
        wallet_id: str,
        amount: Decimal,
        event_id: str | None,
        withdraw_id: str | None,
        transaction_date: datetime,
    ) -> WalletTransaction:
        tx = WalletTransaction(
            wallet_id=wallet_id,
            amount=amount,
            event_id=event_id,
            withdraw_id=withdraw_id,
            transaction_date=transaction_date,
        )
        self.session.add(tx)
        await self.session.flush()
        await self.session.refresh(tx)
        return tx

    async def list_transactions_for_user(self, user_id: str, limit: int, offset: int) -> Sequence[WalletTransaction]:
        stmt = (
            select(WalletTransaction)
            .join(Wallet, WalletTransaction.wallet_id == Wallet.id)
            .where(Wallet.user_id == user_id)
            .order_by(desc(WalletTransaction.transaction_date))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def list_transactions_for_event(self, event_id: str) -> Sequence[WalletTransaction]:
        stmt = (
            select(WalletTransaction)
            .where(WalletTransaction.event_id == event_id)
            .order_by(desc(WalletTransaction.transaction_date))
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def list_transactions(self, limit: int, offset: int) -> Sequence[WalletTransaction]:
        stmt = select(WalletTransaction).order_by(desc(WalletTransaction.transaction_date)).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def count_transactions(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(WalletTransaction))
        return result.scalar_one()

    async def list_transactions_for_hotel(self, hotel_id: str) -> Sequence[WalletTransaction]:
        stmt = (
            select(WalletTransaction)
            .join(Wallet, WalletTransaction.wallet_id == Wallet.id)
            .join(User, Wallet.user_id == User.id)
            .where(User.hotel_id == hotel_id)
            .order_by(desc(WalletTransaction.transaction_date))
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def list_transactions_between(self, start: datetime, end: datetime) -> Sequence[WalletTransaction]:
        stmt = (
            select(WalletTransaction)
            .where(WalletTransaction.transaction_date >= start, WalletTransaction.transaction_date < end)
            .order_by(desc(WalletTransaction.transaction_date))
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()
