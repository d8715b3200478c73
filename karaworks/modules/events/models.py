"""Domain models for events."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


class EventStatus:
    PENDING = "pending"
    POSTED = "posted"
    FINISHED = "finished"

    ALL = frozenset({PENDING, POSTED, FINISHED})
    # finished is reached only through the payout workflow
    EDITABLE = frozenset({PENDING, POSTED})


@dataclass(slots=True)
class Event:
    id: str
    creator_id: str
    name: str
    event_date: datetime
    salary: Optional[Decimal]
    person_count: int
    status: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_finished(self) -> bool:
        return self.status == EventStatus.FINISHED


@dataclass(slots=True)
class EventCreateInput:
    creator_id: str
    name: str
    event_date: datetime
    salary: Decimal
    person_count: int
    description: Optional[str] = None
    status: str = EventStatus.POSTED
