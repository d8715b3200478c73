"""SQLAlchemy implementation of the hotel repository."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.db.models import Hotel as HotelModel
from karaworks.modules.hotels.exceptions import HotelAlreadyExistsError
from karaworks.modules.hotels.models import Hotel

DUPLICATE_EMAIL = "Hotel with this email already exists"


class SqlHotelRepository:
    """Hotel repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, hotel_id: str) -> Hotel | None:
        result = await self._session.execute(select(HotelModel).where(HotelModel.id == hotel_id))
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_hotels(self) -> Sequence[Hotel]:
        result = await self._session.execute(select(HotelModel).order_by(HotelModel.name))
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create_hotel(self, *, email: str, name: str, logo: str | None) -> Hotel:
        model = HotelModel(email=email, name=name, logo=logo)
        try:
            async with self._session.begin_nested():
                self._session.add(model)
        except IntegrityError as exc:
            raise HotelAlreadyExistsError(DUPLICATE_EMAIL) from exc
        await self._session.refresh(model)
        return self._to_domain(model)

    async def update_hotel(self, hotel_id: str, changes: Mapping[str, Any]) -> Hotel | None:
        stmt = (
            update(HotelModel)
            .where(HotelModel.id == hotel_id)
            .values(**changes)
            .execution_options(synchronize_session="fetch", populate_existing=True)
            .returning(HotelModel)
        )
        try:
            async with self._session.begin_nested():
                result = await self._session.execute(stmt)
                model = result.scalars().one_or_none()
        except IntegrityError as exc:
            raise HotelAlreadyExistsError(DUPLICATE_EMAIL) from exc
        return self._to_domain(model) if model else None

    async def delete_hotel(self, hotel_id: str) -> bool:
        result = await self._session.execute(
            delete(HotelModel).where(HotelModel.id == hotel_id).returning(HotelModel.id)
        )
        return result.scalar_one_or_none() is not None

    @staticmethod
    def _to_domain(model: HotelModel) -> Hotel:
        return Hotel(
            id=str(model.id),
            email=model.email,
            name=model.name,
            logo=model.logo,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
