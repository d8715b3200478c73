"""Repository protocol for applications."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from .models import Application


class ApplicationRepository(Protocol):
    async def get_by_id(self, application_id: str) -> Application | None:
        ...

    async def create_application(self, *, event_id: str, user_id: str, status: str) -> Application:
        ...

    async def list_for_event(self, event_id: str) -> Sequence[Application]:
        ...

    async def list_applications(
        self,
        *,
        event_id: str | None = None,
        user_id: str | None = None,
        status: str | None = None,
    ) -> Sequence[Application]:
        ...

    async def list_clocked_out(self, event_id: str) -> Sequence[Application]:
        ...

    async def update_clock(
        self,
        application_id: str,
        *,
        qr_field: str,
        qr_data: str,
        prove_field: str,
        prove: str | None,
    ) -> Application | None:
        ...

    async def update_status(self, application_id: str, status: str) -> None:
        ...

    async def update_application(self, application_id: str, changes: Mapping[str, Any]) -> Application | None:
        ...

    async def delete_application(self, application_id: str) -> bool:
        ...
