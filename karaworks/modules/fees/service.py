"""Platform-wide withdraw fees."""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.infrastructure.database.repositories.fee_repository import SqlFeeRepository

from .models import FeeSchedule
from .repository import FeeRepository

logger = logging.getLogger(__name__)


class FeeService:
    def __init__(self, repository: FeeRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "FeeService":
        return cls(SqlFeeRepository(session))

    async def get_fees(self) -> FeeSchedule:
        fees = await self._repository.get_fees()
        # nothing configured yet means no fees are charged
        return fees or FeeSchedule(bank_fee=Decimal("0"), platform_fee=Decimal("0"))

    async def update_fees(
        self,
        *,
        bank_fee: Decimal | None = None,
        platform_fee: Decimal | None = None,
    ) -> FeeSchedule:
        if bank_fee is None and platform_fee is None:
            raise ValueError("No fields to update")
        for value in (bank_fee, platform_fee):
            if value is not None and value < 0:
                raise ValueError(f"Fee must not be negative: {value}")
        fees = await self._repository.save_fees(bank_fee=bank_fee, platform_fee=platform_fee)
        logger.info("Fees updated: bank %s, platform %s", fees.bank_fee, fees.platform_fee)
        return fees
