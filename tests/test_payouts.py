"""Tests for the event finish / worker payout workflow."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from factories import add_application, add_event, add_user
from karaworks.db import models
from karaworks.infrastructure.database.repositories import (
    SqlApplicationRepository,
    SqlEventRepository,
    SqlWalletRepository,
)
from karaworks.modules.events import EventAlreadyFinishedError, EventNotFoundError
from karaworks.modules.payouts import PayoutService, coerce_amount
from karaworks.modules.wallets.service import WalletService

CLOCK_OUT = '{"type": "clock_out"}'


async def _balance(session, user_id):
    result = await session.execute(select(models.Wallet.balance).where(models.Wallet.user_id == user_id))
    return result.scalar_one_or_none()


async def _transactions(session, event_id):
    result = await session.execute(
        select(models.WalletTransaction).where(models.WalletTransaction.event_id == event_id)
    )
    return result.scalars().all()


async def _status(session, model, row_id):
    result = await session.execute(select(model.status).where(model.id == row_id))
    return result.scalar_one()


@pytest.mark.anyio
class TestFinishEvent:
    async def test_credits_only_clocked_out_workers(self, session, session_factory):
        hotel = await add_user(session, "0800001", role="hotel")
        worker_1 = await add_user(session, "0800002")
        worker_2 = await add_user(session, "0800003")
        event = await add_event(session, hotel, salary=Decimal("500000"))
        app_1 = await add_application(session, event, worker_1, clock_out=CLOCK_OUT)
        app_2 = await add_application(session, event, worker_2)
        await session.commit()

        result = await PayoutService.with_session(session).finish_event(event.id)
        await session.commit()

        assert result.processed_count == 1
        assert result.processed[0].application_id == app_1.id
        assert result.processed[0].user_id == worker_1.id
        assert result.amount == Decimal("500000")

        async with session_factory() as check:
            assert await _balance(check, worker_1.id) == Decimal("500000")
            assert await _balance(check, worker_2.id) is None
            transactions = await _transactions(check, event.id)
            assert len(transactions) == 1
            assert transactions[0].withdraw_id is None
            assert transactions[0].amount == Decimal("500000")
            assert await _status(check, models.Application, app_1.id) == "finished"
            assert await _status(check, models.Application, app_2.id) == "accepted"
            assert await _status(check, models.Event, event.id) == "finished"

    async def test_ledger_total_matches_eligible_workers(self, session, session_factory):
        hotel = await add_user(session, "0800010", role="hotel")
        event = await add_event(session, hotel, salary=Decimal("125000.50"))
        workers = [await add_user(session, f"08001{i:02d}") for i in range(4)]
        for worker in workers[:3]:
            await add_application(session, event, worker, clock_out=CLOCK_OUT)
        await add_application(session, event, workers[3])
        await session.commit()

        result = await PayoutService.with_session(session).finish_event(event.id)
        await session.commit()

        assert result.processed_count == 3
        assert {item.user_id for item in result.processed} == {w.id for w in workers[:3]}
        async with session_factory() as check:
            total = await check.execute(
                select(func.sum(models.WalletTransaction.amount)).where(
                    models.WalletTransaction.event_id == event.id
                )
            )
            assert Decimal(total.scalar_one()) == Decimal("125000.50") * 3

    async def test_existing_wallet_balance_is_increased(self, session, session_factory):
        hotel = await add_user(session, "0800020", role="hotel")
        worker = await add_user(session, "0800021")
        session.add(models.Wallet(user_id=worker.id, balance=Decimal("1000")))
        event = await add_event(session, hotel, salary=Decimal("250"))
        await add_application(session, event, worker, clock_out=CLOCK_OUT)
        await session.commit()

        await PayoutService.with_session(session).finish_event(event.id)
        await session.commit()

        async with session_factory() as check:
            assert await _balance(check, worker.id) == Decimal("1250")

    async def test_no_eligible_applications_still_finishes(self, session, session_factory):
        hotel = await add_user(session, "0800030", role="hotel")
        worker = await add_user(session, "0800031")
        event = await add_event(session, hotel)
        await add_application(session, event, worker)
        await session.commit()

        result = await PayoutService.with_session(session).finish_event(event.id)
        await session.commit()

        assert result.processed_count == 0
        assert result.message == "Event finished, no clocked-out workers found"
        async with session_factory() as check:
            assert await _status(check, models.Event, event.id) == "finished"
            assert await _transactions(check, event.id) == []

    async def test_unknown_event(self, session):
        with pytest.raises(EventNotFoundError):
            await PayoutService.with_session(session).finish_event("missing-event")

    async def test_second_finish_is_rejected_and_pays_nothing(self, session, session_factory):
        hotel = await add_user(session, "0800040", role="hotel")
        worker = await add_user(session, "0800041")
        event = await add_event(session, hotel, salary=Decimal("500000"))
        await add_application(session, event, worker, clock_out=CLOCK_OUT)
        await session.commit()

        await PayoutService.with_session(session).finish_event(event.id)
        await session.commit()

        async with session_factory() as retry:
            with pytest.raises(EventAlreadyFinishedError):
                await PayoutService.with_session(retry).finish_event(event.id)
            await retry.rollback()

        async with session_factory() as check:
            assert await _balance(check, worker.id) == Decimal("500000")
            assert len(await _transactions(check, event.id)) == 1

    async def test_losing_the_status_race_is_rejected(self, session, session_factory):
        hotel = await add_user(session, "0800050", role="hotel")
        worker = await add_user(session, "0800051")
        event = await add_event(session, hotel)
        await add_application(session, event, worker, clock_out=CLOCK_OUT)
        await session.commit()
        # rollback below expires the ORM rows, so keep plain ids
        worker_id, event_id = worker.id, event.id

        events = SqlEventRepository(session)
        loaded = await events.get_by_id(event_id)

        class StaleEventRepository(SqlEventRepository):
            async def get_by_id(self, event_id):
                # returns the pre-finish snapshot, as a concurrent reader would have seen it
                return loaded

        async with session_factory() as other:
            assert await SqlEventRepository(other).mark_finished(event_id, datetime.now(timezone.utc))
            await other.commit()

        service = PayoutService(
            StaleEventRepository(session),
            SqlApplicationRepository(session),
            WalletService.with_session(session),
        )
        with pytest.raises(EventAlreadyFinishedError):
            await service.finish_event(event_id)
        await session.rollback()

        async with session_factory() as check:
            assert await _balance(check, worker_id) is None
            assert await _transactions(check, event_id) == []

    async def test_store_failure_rolls_back_every_credit(self, session, session_factory):
        hotel = await add_user(session, "0800060", role="hotel")
        event = await add_event(session, hotel, salary=Decimal("300"))
        workers = [await add_user(session, f"08006{i}") for i in range(1, 4)]
        for worker in workers:
            await add_application(session, event, worker, clock_out=CLOCK_OUT)
        await session.commit()
        event_id = event.id
        worker_ids = [worker.id for worker in workers]

        class FlakyWalletRepository(SqlWalletRepository):
            calls = 0

            async def add_transaction(self, **kwargs):
                FlakyWalletRepository.calls += 1
                if FlakyWalletRepository.calls == 2:
                    raise OperationalError("INSERT INTO wallet_transactions", {}, Exception("disk I/O error"))
                return await super().add_transaction(**kwargs)

        service = PayoutService(
            SqlEventRepository(session),
            SqlApplicationRepository(session),
            WalletService(FlakyWalletRepository(session)),
        )
        with pytest.raises(OperationalError):
            await service.finish_event(event_id)
        await session.rollback()

        async with session_factory() as check:
            assert await _status(check, models.Event, event_id) == "posted"
            assert await _transactions(check, event_id) == []
            for worker_id in worker_ids:
                assert not await _balance(check, worker_id)

        # the event can be finished again once the store recovers
        async with session_factory() as retry:
            result = await PayoutService.with_session(retry).finish_event(event_id)
            await retry.commit()
        assert result.processed_count == 3


class TestCoerceAmount:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (Decimal("500000.00"), Decimal("500000.00")),
            (750, Decimal("750")),
            ("12.5", Decimal("12.5")),
            (None, Decimal("0")),
            ("abc", Decimal("0")),
            (float("nan"), Decimal("0")),
            (-10, Decimal("0")),
        ],
    )
    def test_values(self, value, expected):
        assert coerce_amount(value) == expected
