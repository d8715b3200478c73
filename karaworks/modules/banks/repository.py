from __future__ import annotations

from typing import Protocol, Sequence

from .models import Bank


class BankRepository(Protocol):
    async def get_by_id(self, bank_id: str) -> Bank | None:
        ...

    async def list_banks(self) -> Sequence[Bank]:
        ...

    async def create_bank(self, *, name: str) -> Bank:
        ...

    async def rename_bank(self, bank_id: str, name: str) -> Bank | None:
        ...

    async def delete_bank(self, bank_id: str) -> bool:
        ...
