"""Result models for the event payout workflow."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(slots=True)
class PaidApplication:
    application_id: str
    user_id: str


@dataclass(slots=True)
class PayoutResult:
    event_id: str
    amount: Decimal
    finished_at: datetime
    processed: list[PaidApplication] = field(default_factory=list)

    @property
    def processed_count(self) -> int:
        return len(self.processed)

    @property
    def message(self) -> str:
        if not self.processed:
            return "Event finished, no clocked-out workers found"
        return "Event finished and workers credited successfully"
