"""Bank directory used for worker payout accounts."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.infrastructure.database.repositories.bank_repository import SqlBankRepository

from .exceptions import BankNotFoundError
from .models import Bank
from .repository import BankRepository


class BankService:
    def __init__(self, repository: BankRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "BankService":
        return cls(SqlBankRepository(session))

    async def get_bank(self, bank_id: str) -> Bank | None:
        return await self._repository.get_by_id(bank_id)

    async def list_banks(self) -> Sequence[Bank]:
        return await self._repository.list_banks()

    async def create_bank(self, name: str) -> Bank:
        return await self._repository.create_bank(name=name)

    async def rename_bank(self, bank_id: str, name: str) -> Bank:
        bank = await self._repository.rename_bank(bank_id, name)
        if bank is None:
            raise BankNotFoundError("Bank not found")
        return bank

    async def delete_bank(self, bank_id: str) -> None:
        if not await self._repository.delete_bank(bank_id):
            raise BankNotFoundError("Bank not found")
