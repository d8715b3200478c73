"""Domain services for event records."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.infrastructure.database.repositories.event_repository import SqlEventRepository
from karaworks.infrastructure.database.repositories.user_repository import SqlUserRepository
from karaworks.modules.users.repository import UserRepository

from .exceptions import EventAlreadyFinishedError, EventCreatorNotFoundError, EventNotFoundError
from .models import Event, EventCreateInput, EventStatus
from .repository import EventRepository


UPDATABLE_FIELDS = frozenset({"name", "description", "event_date", "salary", "person_count", "status"})
REQUIRED_FIELDS = UPDATABLE_FIELDS - {"description"}


class EventService:
    def __init__(self, repository: EventRepository, users: UserRepository) -> None:
        self._repository = repository
        self._users = users

    @classmethod
    def with_session(cls, session: AsyncSession) -> "EventService":
        return cls(SqlEventRepository(session), SqlUserRepository(session))

    async def get_event(self, event_id: str) -> Event | None:
        return await self._repository.get_by_id(event_id)

    async def list_events(self, status: str | None = None, creator_id: str | None = None) -> Sequence[Event]:
        return await self._repository.list_events(status=status, creator_id=creator_id)

    async def create_event(self, payload: EventCreateInput) -> Event:
        if payload.status not in EventStatus.ALL:
            raise ValueError(f"Unknown event status: {payload.status}")
        creator = await self._users.get_by_id(payload.creator_id)
        if creator is None:
            raise EventCreatorNotFoundError(f'User with id "{payload.creator_id}" not found')
        return await self._repository.create_event(
            creator_id=payload.creator_id,
            name=payload.name,
            description=payload.description,
            event_date=payload.event_date,
            salary=payload.salary,
            person_count=payload.person_count,
            status=payload.status,
        )

    async def update_event(self, event_id: str, changes: Mapping[str, Any]) -> Event:
        """Partially update an event that has not been finished yet.

        Finishing goes through the payout workflow only, so ``status`` may move
        between ``pending`` and ``posted`` here and nothing else.
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown event fields: {', '.join(sorted(unknown))}")
        if not changes:
            raise ValueError("No fields to update")
        for field in REQUIRED_FIELDS & set(changes):
            if changes[field] is None:
                raise ValueError(f"{field} must not be null")
        if "status" in changes and changes["status"] not in EventStatus.EDITABLE:
            raise ValueError("status must be pending or posted; use the finish endpoint to settle an event")

        event = await self._repository.update_event(event_id, changes)
        if event is not None:
            return event
        if await self._repository.get_by_id(event_id) is None:
            raise EventNotFoundError("Event not found")
        raise EventAlreadyFinishedError("Event already finished")

    async def delete_event(self, event_id: str) -> None:
        if not await self._repository.delete_event(event_id):
            raise EventNotFoundError("Event not found")
