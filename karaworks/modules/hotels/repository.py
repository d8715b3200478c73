from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from .models import Hotel


class HotelRepository(Protocol):
    async def get_by_id(self, hotel_id: str) -> Hotel | None:
        ...

    async def list_hotels(self) -> Sequence[Hotel]:
        ...

    async def create_hotel(self, *, email: str, name: str, logo: str | None) -> Hotel:
        ...

    async def update_hotel(self, hotel_id: str, changes: Mapping[str, Any]) -> Hotel | None:
        ...

    async def delete_hotel(self, hotel_id: str) -> bool:
        ...
