"""Domain services for worker applications to events."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.infrastructure.database.repositories.application_repository import SqlApplicationRepository
from karaworks.infrastructure.database.repositories.event_repository import SqlEventRepository
from karaworks.infrastructure.database.repositories.user_repository import SqlUserRepository
from karaworks.modules.events.repository import EventRepository
from karaworks.modules.users.repository import UserRepository

from .exceptions import ApplicationNotFoundError, ApplicationReferenceError
from .models import Application, ApplicationStatus
from .repository import ApplicationRepository


UPDATABLE_FIELDS = frozenset(
    {"status", "clock_in_qr_data", "clock_out_qr_data", "clock_in_prove", "clock_out_prove"}
)


class ApplicationService:
    """Worker applications and the clock-in / clock-out markers recorded on them."""

    def __init__(
        self,
        repository: ApplicationRepository,
        events: EventRepository,
        users: UserRepository,
    ) -> None:
        self._repository = repository
        self._events = events
        self._users = users

    @classmethod
    def with_session(cls, session: AsyncSession) -> "ApplicationService":
        return cls(
            SqlApplicationRepository(session),
            SqlEventRepository(session),
            SqlUserRepository(session),
        )

    async def get_application(self, application_id: str) -> Application | None:
        return await self._repository.get_by_id(application_id)

    async def list_for_event(self, event_id: str) -> Sequence[Application]:
        return await self._repository.list_for_event(event_id)

    async def list_applications(
        self,
        *,
        event_id: str | None = None,
        user_id: str | None = None,
        status: str | None = None,
    ) -> Sequence[Application]:
        return await self._repository.list_applications(event_id=event_id, user_id=user_id, status=status)

    async def apply(self, event_id: str, user_id: str, status: str = ApplicationStatus.APPLIED) -> Application:
        if await self._events.get_by_id(event_id) is None:
            raise ApplicationReferenceError(f'Event with id "{event_id}" not found')
        if await self._users.get_by_id(user_id) is None:
            raise ApplicationReferenceError(f'User with id "{user_id}" not found')
        return await self._repository.create_application(event_id=event_id, user_id=user_id, status=status)

    async def record_clock_in(self, application_id: str, qr_data: str, prove: str | None = None) -> Application:
        application = await self._repository.update_clock(
            application_id,
            qr_field="clock_in_qr_data",
            qr_data=qr_data,
            prove_field="clock_in_prove",
            prove=prove,
        )
        if application is None:
            raise ApplicationNotFoundError(application_id)
        return application

    async def record_clock_out(self, application_id: str, qr_data: str, prove: str | None = None) -> Application:
        """Attach the clock-out marker that makes the application eligible for payout."""
        application = await self._repository.update_clock(
            application_id,
            qr_field="clock_out_qr_data",
            qr_data=qr_data,
            prove_field="clock_out_prove",
            prove=prove,
        )
        if application is None:
            raise ApplicationNotFoundError(application_id)
        return application

    async def update_application(self, application_id: str, changes: Mapping[str, Any]) -> Application:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown application fields: {', '.join(sorted(unknown))}")
        if not changes:
            raise ValueError("No fields to update")
        if "status" in changes and changes["status"] not in ApplicationStatus.ALL:
            raise ValueError(f"Unknown application status: {changes['status']}")
        application = await self._repository.update_application(application_id, changes)
        if application is None:
            raise ApplicationNotFoundError(application_id)
        return application

    async def delete_application(self, application_id: str) -> None:
        if not await self._repository.delete_application(application_id):
            raise ApplicationNotFoundError(application_id)
