"""SQLAlchemy implementation of the application repository."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy import delete, desc, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.db.models import Application as ApplicationModel
from karaworks.modules.applications.exceptions import ApplicationAlreadyExistsError
from karaworks.modules.applications.models import Application


class SqlApplicationRepository:
    """Application repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, application_id: str) -> Application | None:
        model = await self._get_model(application_id)
        return self._to_domain(model) if model else None

    async def create_application(self, *, event_id: str, user_id: str, status: str) -> Application:
        model = ApplicationModel(event_id=event_id, user_id=user_id, status=status)
        try:
            async with self._session.begin_nested():
                self._session.add(model)
        except IntegrityError as exc:
            raise ApplicationAlreadyExistsError("User has already applied to this event") from exc
        await self._session.refresh(model)
        return self._to_domain(model)

    async def list_for_event(self, event_id: str) -> Sequence[Application]:
        return await self.list_applications(event_id=event_id)

    async def list_applications(
        self,
        *,
        event_id: str | None = None,
        user_id: str | None = None,
        status: str | None = None,
    ) -> Sequence[Application]:
        stmt = select(ApplicationModel)
        if event_id:
            stmt = stmt.where(ApplicationModel.event_id == event_id)
        if user_id:
            stmt = stmt.where(ApplicationModel.user_id == user_id)
        if status:
            stmt = stmt.where(ApplicationModel.status == status)
        stmt = stmt.order_by(desc(ApplicationModel.created_at))
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_clocked_out(self, event_id: str) -> Sequence[Application]:
        stmt = (
            select(ApplicationModel)
            .where(
                ApplicationModel.event_id == event_id,
                ApplicationModel.clock_out_qr_data.is_not(None),
            )
            .order_by(ApplicationModel.created_at, ApplicationModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def update_clock(
        self,
        application_id: str,
        *,
        qr_field: str,
        qr_data: str,
        prove_field: str,
        prove: str | None,
    ) -> Application | None:
        model = await self._get_model(application_id)
        if model is None:
            return None
        setattr(model, qr_field, qr_data)
        if prove is not None:
            setattr(model, prove_field, prove)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def update_status(self, application_id: str, status: str) -> None:
        stmt = (
            update(ApplicationModel)
            .where(ApplicationModel.id == application_id)
            .values(status=status)
            .execution_options(synchronize_session="fetch")
        )
        await self._session.execute(stmt)

    async def update_application(self, application_id: str, changes: Mapping[str, Any]) -> Application | None:
        stmt = (
            update(ApplicationModel)
            .where(ApplicationModel.id == application_id)
            .values(**changes)
            .execution_options(synchronize_session="fetch", populate_existing=True)
            .returning(ApplicationModel)
        )
        result = await self._session.execute(stmt)
        model = result.scalars().one_or_none()
        return self._to_domain(model) if model else None

    async def delete_application(self, application_id: str) -> bool:
        stmt = delete(ApplicationModel).where(ApplicationModel.id == application_id).returning(ApplicationModel.id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def _get_model(self, application_id: str) -> ApplicationModel | None:
        stmt = select(ApplicationModel).where(ApplicationModel.id == application_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _to_domain(model: ApplicationModel) -> Application:
        return Application(
            id=str(model.id),
            event_id=model.event_id,
            user_id=model.user_id,
            status=model.status,
            clock_in_qr_data=model.clock_in_qr_data,
            clock_out_qr_data=model.clock_out_qr_data,
            clock_in_prove=model.clock_in_prove,
            clock_out_prove=model.clock_out_prove,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
