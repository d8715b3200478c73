"""Repository protocol for events."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping, Protocol, Sequence

from .models import Event


class EventRepository(Protocol):
    async def get_by_id(self, event_id: str) -> Event | None:
        ...

    async def list_events(self, *, status: str | None, creator_id: str | None) -> Sequence[Event]:
        ...

    async def create_event(
        self,
        *,
        creator_id: str,
        name: str,
        description: str | None,
        event_date: datetime,
        salary: Decimal,
        person_count: int,
        status: str,
    ) -> Event:
        ...

    async def update_event(self, event_id: str, changes: Mapping[str, Any]) -> Event | None:
        """Apply ``changes`` unless the event is finished; None when nothing was updated."""
        ...

    async def delete_event(self, event_id: str) -> bool:
        ...

    async def mark_finished(self, event_id: str, finished_at: datetime) -> bool:
        """Move the event to ``finished`` unless it already is; report whether this call did it."""
        ...
