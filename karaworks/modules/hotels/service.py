"""Domain services for hotels."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.infrastructure.database.repositories.hotel_repository import SqlHotelRepository

from .exceptions import HotelNotFoundError
from .models import Hotel, HotelCreateInput
from .repository import HotelRepository

UPDATABLE_FIELDS = frozenset({"email", "name", "logo"})


class HotelService:
    def __init__(self, repository: HotelRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "HotelService":
        return cls(SqlHotelRepository(session))

    async def get_hotel(self, hotel_id: str) -> Hotel | None:
        return await self._repository.get_by_id(hotel_id)

    async def list_hotels(self) -> Sequence[Hotel]:
        return await self._repository.list_hotels()

    async def create_hotel(self, payload: HotelCreateInput) -> Hotel:
        return await self._repository.create_hotel(email=payload.email, name=payload.name, logo=payload.logo)

    async def update_hotel(self, hotel_id: str, changes: Mapping[str, Any]) -> Hotel:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown hotel fields: {', '.join(sorted(unknown))}")
        if not changes:
            raise ValueError("No fields to update")
        for field in ("email", "name"):
            if field in changes and changes[field] is None:
                raise ValueError(f"{field} must not be null")
        hotel = await self._repository.update_hotel(hotel_id, changes)
        if hotel is None:
            raise HotelNotFoundError("Hotel not found")
        return hotel

    async def delete_hotel(self, hotel_id: str) -> None:
        if not await self._repository.delete_hotel(hotel_id):
            raise HotelNotFoundError("Hotel not found")
