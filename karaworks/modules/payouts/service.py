"""Event completion and worker payout.

``PayoutService.finish_event`` settles payroll for one event:

1. the event is claimed with a conditional status update, so two concurrent
   calls cannot both pay out;
2. every application that recorded a clock-out marker is credited the
   event's salary, one worker at a time, in creation order;
3. each paid application moves to ``finished``.

The service never commits. All steps share the caller's session, so the HTTP
layer commits once at the end and any failure rolls back every credit along
with the event's status change, leaving the event safe to finish again.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.infrastructure.database.repositories.application_repository import SqlApplicationRepository
from karaworks.infrastructure.database.repositories.event_repository import SqlEventRepository
from karaworks.modules.applications.models import ApplicationStatus
from karaworks.modules.applications.repository import ApplicationRepository
from karaworks.modules.events.exceptions import EventAlreadyFinishedError, EventNotFoundError
from karaworks.modules.events.repository import EventRepository
from karaworks.modules.wallets.service import WalletService

from .models import PaidApplication, PayoutResult

logger = logging.getLogger(__name__)


def coerce_amount(value: Any) -> Decimal:
    """Convert a stored salary to a payout amount; anything unusable pays zero."""
    if value is None or isinstance(value, bool):
        return Decimal("0")
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not amount.is_finite() or amount < 0:
        return Decimal("0")
    return amount


class PayoutService:
    def __init__(
        self,
        events: EventRepository,
        applications: ApplicationRepository,
        wallets: WalletService,
    ) -> None:
        self._events = events
        self._applications = applications
        self._wallets = wallets

    @classmethod
    def with_session(cls, session: AsyncSession) -> "PayoutService":
        return cls(
            SqlEventRepository(session),
            SqlApplicationRepository(session),
            WalletService.with_session(session),
        )

    async def finish_event(self, event_id: str) -> PayoutResult:
        event = await self._events.get_by_id(event_id)
        if event is None:
            raise EventNotFoundError("Event not found")
        if event.is_finished():
            raise EventAlreadyFinishedError("Event already finished")

        finished_at = datetime.now(timezone.utc)
        if not await self._events.mark_finished(event_id, finished_at):
            logger.warning("Event %s was finished by a concurrent request", event_id)
            raise EventAlreadyFinishedError("Event already finished")

        amount = coerce_amount(event.salary)
        result = PayoutResult(event_id=event_id, amount=amount, finished_at=finished_at)

        applications = await self._applications.list_clocked_out(event_id)
        if not applications:
            logger.info("Event %s finished with no clocked-out workers", event_id)
            return result

        for application in applications:
            await self._wallets.credit(
                user_id=application.user_id,
                amount=amount,
                event_id=event_id,
                transaction_date=finished_at,
            )
            await self._applications.update_status(application.id, ApplicationStatus.FINISHED)
            result.processed.append(PaidApplication(application_id=application.id, user_id=application.user_id))

        logger.info(
            "Event %s finished: credited %s to %d workers",
            event_id,
            amount,
            result.processed_count,
        )
        return result
