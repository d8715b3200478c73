"""SQLAlchemy implementation of the event repository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping, Sequence

from sqlalchemy import delete, desc, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.db.models import Event as EventModel
from karaworks.modules.events.exceptions import EventInUseError
from karaworks.modules.events.models import Event, EventStatus


class SqlEventRepository:
    """Event repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, event_id: str) -> Event | None:
        stmt = select(EventModel).where(EventModel.id == event_id)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def list_events(self, *, status: str | None, creator_id: str | None) -> Sequence[Event]:
        stmt = select(EventModel)
        if status:
            stmt = stmt.where(EventModel.status == status)
        if creator_id:
            stmt = stmt.where(EventModel.creator_id == creator_id)
        stmt = stmt.order_by(desc(EventModel.event_date))
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

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
        model = EventModel(
            creator_id=creator_id,
            name=name,
            description=description,
            event_date=event_date,
            salary=salary,
            person_count=person_count,
            status=status,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def update_event(self, event_id: str, changes: Mapping[str, Any]) -> Event | None:
        # same guard as mark_finished so an edit cannot race a payout
        stmt = (
            update(EventModel)
            .where(EventModel.id == event_id, EventModel.status != EventStatus.FINISHED)
            .values(**changes)
            .execution_options(synchronize_session="fetch", populate_existing=True)
            .returning(EventModel)
        )
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalars().one_or_none())

    async def delete_event(self, event_id: str) -> bool:
        stmt = delete(EventModel).where(EventModel.id == event_id).returning(EventModel.id)
        try:
            async with self._session.begin_nested():
                result = await self._session.execute(stmt)
                deleted = result.scalar_one_or_none()
        except IntegrityError as exc:
            raise EventInUseError("Event has settled wallet transactions") from exc
        return deleted is not None

    async def mark_finished(self, event_id: str, finished_at: datetime) -> bool:
        # Conditional update: only one concurrent caller can see the row come back.
        stmt = (
            update(EventModel)
            .where(EventModel.id == event_id, EventModel.status != EventStatus.FINISHED)
            .values(status=EventStatus.FINISHED, updated_at=finished_at)
            .execution_options(synchronize_session="fetch")
            .returning(EventModel.id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    @staticmethod
    def _to_domain(model: EventModel | None) -> Event | None:
        if model is None:
            return None
        return Event(
            id=str(model.id),
            creator_id=model.creator_id,
            name=model.name,
            description=model.description,
            event_date=model.event_date,
            salary=model.salary,
            person_count=model.person_count,
            status=model.status,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
