"""SQLAlchemy implementation of the single-row fee table."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.db.models import Fee as FeeModel
from karaworks.modules.fees.models import FeeSchedule

FEE_ROW_ID = 1


class SqlFeeRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_fees(self) -> FeeSchedule | None:
        model = await self._get_model()
        return self._to_domain(model) if model else None

    async def save_fees(self, *, bank_fee: Decimal | None, platform_fee: Decimal | None) -> FeeSchedule:
        model = await self._get_model()
        if model is None:
            model = FeeModel(id=FEE_ROW_ID, bank_fee=Decimal("0"), platform_fee=Decimal("0"))
            try:
                async with self._session.begin_nested():
                    self._session.add(model)
            except IntegrityError:
                # another request created the row first
                model = await self._get_model()
                if model is None:
                    raise
        if bank_fee is not None:
            model.bank_fee = bank_fee
        if platform_fee is not None:
            model.platform_fee = platform_fee
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def _get_model(self) -> FeeModel | None:
        result = await self._session.execute(select(FeeModel).where(FeeModel.id == FEE_ROW_ID))
        return result.scalar_one_or_none()

    @staticmethod
    def _to_domain(model: FeeModel) -> FeeSchedule:
        return FeeSchedule(
            bank_fee=Decimal(model.bank_fee),
            platform_fee=Decimal(model.platform_fee),
            updated_at=model.updated_at,
        )
