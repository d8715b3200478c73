"""Repository protocol for users."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from .models import User, UserCreateInput


class UserRepository(Protocol):
    async def get_by_id(self, user_id: str) -> User | None:
        ...

    async def get_by_phone(self, phone: str) -> User | None:
        ...

    async def list_users(
        self,
        *,
        hotel_id: str | None = None,
        role: str | None = None,
        bank_id: str | None = None,
        order_by_name: bool = False,
    ) -> Sequence[User]:
        ...

    async def create_user(self, payload: UserCreateInput) -> User:
        ...

    async def update_user(self, user_id: str, changes: Mapping[str, Any]) -> User | None:
        ...

    async def delete_user(self, user_id: str) -> bool:
        ...
