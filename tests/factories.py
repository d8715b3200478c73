"""Row builders for tests."""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.core.security import create_access_token
from karaworks.db import models


async def add_user(session: AsyncSession, phone: str, name: str = "Worker", role: str = "worker") -> models.User:
    user = models.User(phone=phone, name=name, role=role)
    session.add(user)
    await session.flush()
    return user


async def add_event(
    session: AsyncSession,
    creator: models.User,
    salary=Decimal("500000"),
    status: str = "posted",
) -> models.Event:
    event = models.Event(
        creator_id=creator.id,
        name="Wedding Reception",
        event_date=datetime(2026, 12, 25, 18, 0, tzinfo=timezone.utc),
        salary=salary,
        person_count=10,
        status=status,
    )
    session.add(event)
    await session.flush()
    return event


async def add_application(
    session: AsyncSession,
    event: models.Event,
    worker: models.User,
    clock_out: str | None = None,
    status: str = "accepted",
) -> models.Application:
    application = models.Application(
        event_id=event.id,
        user_id=worker.id,
        status=status,
        clock_in_qr_data='{"type": "clock_in"}',
        clock_out_qr_data=clock_out,
    )
    session.add(application)
    await session.flush()
    return application


def auth_headers(user: models.User) -> dict[str, str]:
    token = create_access_token(user.id, user.phone, user.role)
    return {"Authorization": f"Bearer {token}"}
