"""SQLAlchemy implementation of the bank repository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.db.models import Bank as BankModel
from karaworks.modules.banks.models import Bank


class SqlBankRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, bank_id: str) -> Bank | None:
        result = await self._session.execute(select(BankModel).where(BankModel.id == bank_id))
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_banks(self) -> Sequence[Bank]:
        result = await self._session.execute(select(BankModel).order_by(BankModel.name))
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create_bank(self, *, name: str) -> Bank:
        model = BankModel(name=name)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def rename_bank(self, bank_id: str, name: str) -> Bank | None:
        stmt = (
            update(BankModel)
            .where(BankModel.id == bank_id)
            .values(name=name)
            .execution_options(synchronize_session="fetch", populate_existing=True)
            .returning(BankModel)
        )
        result = await self._session.execute(stmt)
        model = result.scalars().one_or_none()
        return self._to_domain(model) if model else None

    async def delete_bank(self, bank_id: str) -> bool:
        result = await self._session.execute(
            delete(BankModel).where(BankModel.id == bank_id).returning(BankModel.id)
        )
        return result.scalar_one_or_none() is not None

    @staticmethod
    def _to_domain(model: BankModel) -> Bank:
        return Bank(
            id=str(model.id),
            name=model.name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
