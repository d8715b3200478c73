"""Domain services for user records."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.infrastructure.database.repositories.bank_repository import SqlBankRepository
from karaworks.infrastructure.database.repositories.hotel_repository import SqlHotelRepository
from karaworks.infrastructure.database.repositories.user_repository import SqlUserRepository
from karaworks.modules.banks.repository import BankRepository
from karaworks.modules.hotels.repository import HotelRepository

from .exceptions import UserAlreadyExistsError, UserNotFoundError, UserReferenceError, UserValidationError
from .models import User, UserCreateInput, UserRole
from .repository import UserRepository

UPDATABLE_FIELDS = frozenset(
    {"phone", "name", "photo", "role", "hotel_id", "bank_id", "bank_account_name", "bank_account_id"}
)
REQUIRED_FIELDS = frozenset({"phone", "name", "role"})


class UserService:
    def __init__(
        self,
        repository: UserRepository,
        hotels: HotelRepository | None = None,
        banks: BankRepository | None = None,
    ) -> None:
        self._repository = repository
        self._hotels = hotels
        self._banks = banks

    @classmethod
    def with_session(cls, session: AsyncSession) -> "UserService":
        return cls(SqlUserRepository(session), SqlHotelRepository(session), SqlBankRepository(session))

    async def get_user(self, user_id: str) -> User | None:
        return await self._repository.get_by_id(user_id)

    async def list_users(
        self,
        *,
        hotel_id: str | None = None,
        role: str | None = None,
        bank_id: str | None = None,
        order_by_name: bool = False,
    ) -> Sequence[User]:
        return await self._repository.list_users(
            hotel_id=hotel_id,
            role=role,
            bank_id=bank_id,
            order_by_name=order_by_name,
        )

    async def create_user(self, payload: UserCreateInput) -> User:
        self._check_role(payload.role, payload.hotel_id)
        await self._check_references(payload.hotel_id, payload.bank_id)
        existing = await self._repository.get_by_phone(payload.phone)
        if existing is not None:
            raise UserAlreadyExistsError(f"Phone number already registered: {payload.phone}")
        return await self._repository.create_user(payload)

    async def update_user(self, user_id: str, changes: Mapping[str, Any]) -> User:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise UserValidationError(f"Unknown user fields: {', '.join(sorted(unknown))}")
        if not changes:
            raise UserValidationError("No fields to update")
        for field in REQUIRED_FIELDS & set(changes):
            if changes[field] is None:
                raise UserValidationError(f"{field} must not be null")

        current = await self._repository.get_by_id(user_id)
        if current is None:
            raise UserNotFoundError("User not found")
        role = changes.get("role", current.role)
        hotel_id = changes["hotel_id"] if "hotel_id" in changes else current.hotel_id
        self._check_role(role, hotel_id)
        await self._check_references(changes.get("hotel_id"), changes.get("bank_id"))

        user = await self._repository.update_user(user_id, changes)
        if user is None:
            raise UserNotFoundError("User not found")
        return user

    async def delete_user(self, user_id: str) -> None:
        if not await self._repository.delete_user(user_id):
            raise UserNotFoundError("User not found")

    @staticmethod
    def _check_role(role: str, hotel_id: str | None) -> None:
        if role not in UserRole.ALL:
            raise UserValidationError('role must be either "hotel" or "worker"')
        if role == UserRole.HOTEL and not hotel_id:
            raise UserValidationError('hotel_id is required when role is "hotel"')

    async def _check_references(self, hotel_id: str | None, bank_id: str | None) -> None:
        if hotel_id and self._hotels is not None and await self._hotels.get_by_id(hotel_id) is None:
            raise UserReferenceError(f'Hotel with id "{hotel_id}" not found')
        if bank_id and self._banks is not None and await self._banks.get_by_id(bank_id) is None:
            raise UserReferenceError(f'Bank with id "{bank_id}" not found')
