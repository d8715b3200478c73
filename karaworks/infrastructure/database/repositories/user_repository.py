"""SQLAlchemy implementation of the user repository."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy import delete, desc, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.db.models import User as UserModel
from karaworks.modules.users.exceptions import UserAlreadyExistsError, UserInUseError
from karaworks.modules.users.models import User, UserCreateInput

DUPLICATE_PHONE = "User with this phone number already exists"


class SqlUserRepository:
    """User repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: str) -> User | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def get_by_phone(self, phone: str) -> User | None:
        stmt = select(UserModel).where(UserModel.phone == phone)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def list_users(
        self,
        *,
        hotel_id: str | None = None,
        role: str | None = None,
        bank_id: str | None = None,
        order_by_name: bool = False,
    ) -> Sequence[User]:
        stmt = select(UserModel)
        if hotel_id:
            stmt = stmt.where(UserModel.hotel_id == hotel_id)
        if role:
            stmt = stmt.where(UserModel.role == role)
        if bank_id:
            stmt = stmt.where(UserModel.bank_id == bank_id)
        stmt = stmt.order_by(UserModel.name if order_by_name else desc(UserModel.created_at))
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create_user(self, payload: UserCreateInput) -> User:
        model = UserModel(
            phone=payload.phone,
            name=payload.name,
            role=payload.role,
            photo=payload.photo,
            hotel_id=payload.hotel_id,
            bank_id=payload.bank_id,
            bank_account_name=payload.bank_account_name,
            bank_account_id=payload.bank_account_id,
        )
        try:
            # a concurrent registration of the same phone loses here, not at commit
            async with self._session.begin_nested():
                self._session.add(model)
        except IntegrityError as exc:
            raise UserAlreadyExistsError(DUPLICATE_PHONE) from exc
        await self._session.refresh(model)
        return self._to_domain(model)

    async def update_user(self, user_id: str, changes: Mapping[str, Any]) -> User | None:
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(**changes)
            .execution_options(synchronize_session="fetch", populate_existing=True)
            .returning(UserModel)
        )
        try:
            async with self._session.begin_nested():
                result = await self._session.execute(stmt)
                model = result.scalars().one_or_none()
        except IntegrityError as exc:
            raise UserAlreadyExistsError(DUPLICATE_PHONE) from exc
        return self._to_domain(model)

    async def delete_user(self, user_id: str) -> bool:
        stmt = delete(UserModel).where(UserModel.id == user_id).returning(UserModel.id)
        try:
            async with self._session.begin_nested():
                result = await self._session.execute(stmt)
                deleted = result.scalar_one_or_none()
        except IntegrityError as exc:
            raise UserInUseError("User owns events with settled wallet transactions") from exc
        return deleted is not None

    @staticmethod
    def _to_domain(model: UserModel | None) -> User | None:
        if model is None:
            return None
        return User(
            id=str(model.id),
            phone=model.phone,
            name=model.name,
            role=model.role or "worker",
            photo=model.photo,
            hotel_id=model.hotel_id,
            bank_id=model.bank_id,
            bank_account_name=model.bank_account_name,
            bank_account_id=model.bank_account_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
