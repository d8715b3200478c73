from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(slots=True)
class FeeSchedule:
    """Flat fees charged on a worker withdraw."""

    bank_fee: Decimal
    platform_fee: Decimal
    updated_at: Optional[datetime] = None
