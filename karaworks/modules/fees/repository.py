from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from .models import FeeSchedule


class FeeRepository(Protocol):
    async def get_fees(self) -> FeeSchedule | None:
        ...

    async def save_fees(self, *, bank_fee: Decimal | None, platform_fee: Decimal | None) -> FeeSchedule:
        """Create the fee row if needed and overwrite the given values."""
        ...
