"""HTTP tests for the API endpoints."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from factories import add_application, add_event, add_user, auth_headers
from karaworks.db import models
from karaworks.infrastructure.database.repositories.wallet_repository import SqlWalletRepository


def _seed_event(run_db, salary=Decimal("500000")):
    async def _seed(session):
        hotel = await add_user(session, "0820001", name="Grand Hotel", role="hotel")
        worker_1 = await add_user(session, "0820002", name="Ana")
        worker_2 = await add_user(session, "0820003", name="Budi")
        event = await add_event(session, hotel, salary=salary)
        app_1 = await add_application(session, event, worker_1, clock_out='{"type": "clock_out"}')
        app_2 = await add_application(session, event, worker_2)
        return hotel, worker_1, worker_2, event, app_1, app_2

    return run_db(_seed)


def test_healthz(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_finish_requires_token(client):
    response = client.post("/api/events/some-event/finish")
    assert response.status_code == 401
    assert response.json() == {"error": "Access token required"}


def test_finish_rejects_bad_token(client):
    response = client.post("/api/events/some-event/finish", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 403


def test_finish_event_pays_clocked_out_workers(client, run_db):
    hotel, worker_1, worker_2, event, app_1, app_2 = _seed_event(run_db)

    response = client.post(f"/api/events/{event.id}/finish", headers=auth_headers(hotel))

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Event finished and workers credited successfully"
    assert body["processedCount"] == 1
    assert body["processed"] == [{"applicationId": app_1.id, "workerId": worker_1.id}]

    wallet = client.get(f"/api/users/{worker_1.id}/wallet", headers=auth_headers(worker_1))
    assert wallet.status_code == 200
    assert Decimal(wallet.json()["balance"]) == Decimal("500000")

    ledger = client.get(f"/api/wallet-transactions/event/{event.id}", headers=auth_headers(hotel))
    assert ledger.status_code == 200
    entries = ledger.json()["data"]
    assert len(entries) == 1
    assert Decimal(entries[0]["amount"]) == Decimal("500000")

    details = client.get(f"/api/events/{event.id}")
    assert details.json()["status"] == "finished"
    pending = client.get(f"/api/applications/{app_2.id}", headers=auth_headers(hotel))
    assert pending.json()["status"] == "accepted"


def test_finish_twice_returns_400_and_keeps_balance(client, run_db):
    hotel, worker_1, _, event, _, _ = _seed_event(run_db)
    assert client.post(f"/api/events/{event.id}/finish", headers=auth_headers(hotel)).status_code == 200

    response = client.post(f"/api/events/{event.id}/finish", headers=auth_headers(hotel))

    assert response.status_code == 400
    assert response.json() == {"error": "Event already finished"}

    async def _ledger(session):
        balance = await session.execute(
            select(models.Wallet.balance).where(models.Wallet.user_id == worker_1.id)
        )
        count = await session.execute(
            select(models.WalletTransaction.id).where(models.WalletTransaction.event_id == event.id)
        )
        return balance.scalar_one(), len(count.all())

    balance, transactions = run_db(_ledger)
    assert balance == Decimal("500000")
    assert transactions == 1


def test_finish_unknown_event_returns_404(client, run_db):
    worker = run_db(lambda session: add_user(session, "0820100"))

    response = client.post("/api/events/does-not-exist/finish", headers=auth_headers(worker))

    assert response.status_code == 404
    assert response.json() == {"error": "Event not found"}


def test_shift_flow_over_http(client, run_db):
    hotel = run_db(lambda session: add_user(session, "0820200", name="Grand Hotel", role="hotel"))

    created = client.post("/api/users", json={"phone": "0820201", "name": "Citra"})
    assert created.status_code == 201
    worker_id = created.json()["id"]

    event = client.post(
        "/api/events",
        headers=auth_headers(hotel),
        json={
            "creator_id": hotel.id,
            "name": "Gala Dinner",
            "event_date": "2026-12-31T19:00:00Z",
            "salary": 350000,
            "person_count": 5,
        },
    )
    assert event.status_code == 201
    event_id = event.json()["id"]
    assert event.json()["status"] == "posted"

    application = client.post(
        "/api/applications",
        headers=auth_headers(hotel),
        json={"event_id": event_id, "user_id": worker_id},
    )
    assert application.status_code == 201
    application_id = application.json()["id"]
    assert application.json()["status"] == "applied"

    duplicate = client.post(
        "/api/applications",
        headers=auth_headers(hotel),
        json={"event_id": event_id, "user_id": worker_id},
    )
    assert duplicate.status_code == 409

    clock_in = client.post(
        f"/api/applications/{application_id}/clock-in",
        headers=auth_headers(hotel),
        json={"qr_data": '{"type": "clock_in"}'},
    )
    assert clock_in.status_code == 200
    clock_out = client.post(
        f"/api/applications/{application_id}/clock-out",
        headers=auth_headers(hotel),
        json={"qr_data": '{"type": "clock_out"}', "prove": "https://cdn.example.com/proof.jpg"},
    )
    assert clock_out.status_code == 200
    assert clock_out.json()["clock_out_prove"] == "https://cdn.example.com/proof.jpg"

    finished = client.post(f"/api/events/{event_id}/finish", headers=auth_headers(hotel))
    assert finished.status_code == 200
    assert finished.json()["processed"] == [{"applicationId": application_id, "workerId": worker_id}]

    history = client.get(f"/api/wallet-transactions/user/{worker_id}", headers=auth_headers(hotel))
    assert [Decimal(entry["amount"]) for entry in history.json()["data"]] == [Decimal("350000")]


def test_create_event_with_unknown_creator(client, run_db):
    hotel = run_db(lambda session: add_user(session, "0820300", role="hotel"))

    response = client.post(
        "/api/events",
        headers=auth_headers(hotel),
        json={
            "creator_id": "missing-user",
            "name": "Gala Dinner",
            "event_date": "2026-12-31T19:00:00Z",
            "salary": 100,
            "person_count": 1,
        },
    )

    assert response.status_code == 404


def test_validation_errors_use_error_body(client, run_db):
    hotel = run_db(lambda session: add_user(session, "0820400", role="hotel"))

    response = client.post(
        "/api/events",
        headers=auth_headers(hotel),
        json={"creator_id": hotel.id, "name": "Gala", "event_date": "2026-12-31T19:00:00Z", "salary": -5, "person_count": 1},
    )

    assert response.status_code == 400
    assert "salary" in response.json()["error"]


def test_listing_endpoints(client, run_db):
    hotel, worker_1, worker_2, event, app_1, app_2 = _seed_event(run_db)

    user = client.get(f"/api/users/{worker_1.id}", headers=auth_headers(hotel))
    assert user.json()["phone"] == "0820002"
    assert client.get("/api/users/missing", headers=auth_headers(hotel)).status_code == 404

    posted = client.get("/api/events", params={"status": "posted", "creator_id": hotel.id})
    assert [item["id"] for item in posted.json()["data"]] == [event.id]
    assert client.get("/api/events", params={"status": "finished"}).json()["data"] == []

    applications = client.get(f"/api/applications/event/{event.id}", headers=auth_headers(hotel))
    assert {item["id"] for item in applications.json()["data"]} == {app_1.id, app_2.id}

    duplicate = client.post("/api/users", json={"phone": "0820002", "name": "Ana again"})
    assert duplicate.status_code == 409


def test_store_failure_returns_500_and_leaves_event_open(client, run_db, monkeypatch):
    hotel, _, _, event, _, _ = _seed_event(run_db)

    async def _failing_add_transaction(self, **kwargs):
        raise OperationalError("INSERT INTO wallet_transactions", {}, Exception("disk I/O error"))

    monkeypatch.setattr(SqlWalletRepository, "add_transaction", _failing_add_transaction)
    unguarded = TestClient(client.app, raise_server_exceptions=False)

    response = unguarded.post(f"/api/events/{event.id}/finish", headers=auth_headers(hotel))

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert client.get(f"/api/events/{event.id}").json()["status"] == "posted"


def test_wallet_of_new_user_is_read_without_writing(client, run_db):
    worker = run_db(lambda session: add_user(session, "0820500"))

    response = client.get(f"/api/users/{worker.id}/wallet", headers=auth_headers(worker))

    assert response.status_code == 200
    assert response.json()["id"] is None
    assert Decimal(response.json()["balance"]) == Decimal("0")

    async def _wallets(session):
        result = await session.execute(select(models.Wallet.id).where(models.Wallet.user_id == worker.id))
        return result.all()

    assert run_db(_wallets) == []


def test_registration_opens_an_empty_wallet(client, run_db):
    admin = run_db(lambda session: add_user(session, "0820509"))
    worker_id = client.post("/api/users", json={"phone": "0820510", "name": "Dewi"}).json()["id"]

    response = client.get(f"/api/users/{worker_id}/wallet", headers=auth_headers(admin))

    assert response.json()["id"] is not None
    assert Decimal(response.json()["balance"]) == Decimal("0")


def test_bank_crud(client, run_db):
    admin = run_db(lambda session: add_user(session, "0820600"))

    assert client.post("/api/banks", json={"name": "BCA"}).status_code == 401
    created = client.post("/api/banks", headers=auth_headers(admin), json={"name": "BCA"})
    assert created.status_code == 201
    bank_id = created.json()["id"]
    client.post("/api/banks", headers=auth_headers(admin), json={"name": "BNI"})

    assert [bank["name"] for bank in client.get("/api/banks").json()["data"]] == ["BCA", "BNI"]

    renamed = client.put(f"/api/banks/{bank_id}", headers=auth_headers(admin), json={"name": "Bank Central Asia"})
    assert renamed.json()["name"] == "Bank Central Asia"
    assert client.get(f"/api/banks/{bank_id}").json()["name"] == "Bank Central Asia"

    assert client.delete(f"/api/banks/{bank_id}", headers=auth_headers(admin)).status_code == 204
    assert client.get(f"/api/banks/{bank_id}").status_code == 404
    missing = client.delete(f"/api/banks/{bank_id}", headers=auth_headers(admin))
    assert missing.json() == {"error": "Bank not found"}


def test_hotel_crud_and_user_link(client, run_db):
    admin = run_db(lambda session: add_user(session, "0820700"))
    headers = auth_headers(admin)

    created = client.post("/api/hotels", headers=headers, json={"email": "desk@grand.example", "name": "Grand"})
    assert created.status_code == 201
    hotel_id = created.json()["id"]

    duplicate = client.post("/api/hotels", headers=headers, json={"email": "desk@grand.example", "name": "Copy"})
    assert duplicate.status_code == 409

    updated = client.put(f"/api/hotels/{hotel_id}", headers=headers, json={"logo": "https://cdn.example.com/g.png"})
    assert updated.status_code == 200
    assert updated.json()["name"] == "Grand"
    assert client.put(f"/api/hotels/{hotel_id}", headers=headers, json={}).status_code == 400
    assert client.put("/api/hotels/missing", headers=headers, json={"name": "X"}).status_code == 404

    no_hotel = client.post("/api/users", json={"phone": "0820701", "name": "Manager", "role": "hotel"})
    assert no_hotel.status_code == 400
    unknown_hotel = client.post(
        "/api/users", json={"phone": "0820701", "name": "Manager", "role": "hotel", "hotel_id": "missing"}
    )
    assert unknown_hotel.status_code == 404

    manager = client.post(
        "/api/users", json={"phone": "0820701", "name": "Manager", "role": "hotel", "hotel_id": hotel_id}
    )
    assert manager.status_code == 201
    staff = client.post("/api/users", json={"phone": "0820702", "name": "Ana", "hotel_id": hotel_id})

    linked = client.get(f"/api/users/hotel/{hotel_id}", headers=headers)
    assert [user["id"] for user in linked.json()["data"]] == [staff.json()["id"], manager.json()["id"]]
    hotel_role = client.get("/api/users/role/hotel", headers=headers)
    assert [user["phone"] for user in hotel_role.json()["data"]] == ["0820701"]

    assert client.delete(f"/api/hotels/{hotel_id}", headers=headers).status_code == 204
    assert client.get(f"/api/users/{staff.json()['id']}", headers=headers).json()["hotel_id"] is None


def test_user_update_and_delete(client, run_db):
    admin = run_db(lambda session: add_user(session, "0820800"))
    headers = auth_headers(admin)
    worker_id = client.post("/api/users", json={"phone": "0820801", "name": "Eka"}).json()["id"]
    client.post("/api/users", json={"phone": "0820802", "name": "Fajar"})

    renamed = client.put(f"/api/users/{worker_id}", headers=headers, json={"name": "Eka Saputra"})
    assert renamed.json()["name"] == "Eka Saputra"

    taken = client.put(f"/api/users/{worker_id}", headers=headers, json={"phone": "0820802"})
    assert taken.status_code == 409
    assert client.put(f"/api/users/{worker_id}", headers=headers, json={"bank_id": "missing"}).status_code == 404
    assert client.put("/api/users/missing", headers=headers, json={"name": "X"}).status_code == 404

    assert client.delete(f"/api/users/{worker_id}", headers=headers).status_code == 204
    assert client.get(f"/api/users/{worker_id}", headers=headers).status_code == 404


def test_fee_settings(client, run_db):
    admin = run_db(lambda session: add_user(session, "0820900"))

    initial = client.get("/api/fee")
    assert initial.status_code == 200
    assert Decimal(initial.json()["bank_fee"]) == Decimal("0")

    updated = client.put("/api/fee", headers=auth_headers(admin), json={"bank_fee": 6500, "platform_fee": 2500})
    assert updated.status_code == 200
    assert Decimal(client.get("/api/fee").json()["platform_fee"]) == Decimal("2500")

    assert client.put("/api/fee", headers=auth_headers(admin), json={}).status_code == 400
    assert client.put("/api/fee", headers=auth_headers(admin), json={"bank_fee": -1}).status_code == 400


def test_event_update_and_delete(client, run_db):
    hotel, _, _, event, _, _ = _seed_event(run_db)
    headers = auth_headers(hotel)

    updated = client.put(f"/api/events/{event.id}", headers=headers, json={"person_count": 3, "status": "pending"})
    assert updated.status_code == 200
    assert updated.json()["person_count"] == 3
    assert updated.json()["status"] == "pending"

    by_status = client.get("/api/events/status/pending")
    assert [item["id"] for item in by_status.json()["data"]] == [event.id]
    by_creator = client.get(f"/api/events/creator/{hotel.id}")
    assert [item["id"] for item in by_creator.json()["data"]] == [event.id]

    finish_through_put = client.put(f"/api/events/{event.id}", headers=headers, json={"status": "finished"})
    assert finish_through_put.status_code == 400

    assert client.post(f"/api/events/{event.id}/finish", headers=headers).status_code == 200
    frozen = client.put(f"/api/events/{event.id}", headers=headers, json={"salary": 1})
    assert frozen.status_code == 400
    assert frozen.json() == {"error": "Event already finished"}

    spare = run_db(lambda session: add_event(session, hotel))
    assert client.delete(f"/api/events/{spare.id}", headers=headers).status_code == 204
    assert client.get(f"/api/events/{spare.id}").status_code == 404
    assert client.delete(f"/api/events/{spare.id}", headers=headers).status_code == 404


def test_application_listing_update_and_delete(client, run_db):
    hotel, worker_1, worker_2, event, app_1, app_2 = _seed_event(run_db)
    headers = auth_headers(hotel)

    mine = client.get(f"/api/applications/user/{worker_1.id}", headers=headers)
    assert [item["id"] for item in mine.json()["data"]] == [app_1.id]

    rejected = client.put(f"/api/applications/{app_2.id}", headers=headers, json={"status": "rejected"})
    assert rejected.status_code == 200
    assert rejected.json()["status"] == "rejected"
    by_status = client.get("/api/applications/status/rejected", headers=headers)
    assert [item["id"] for item in by_status.json()["data"]] == [app_2.id]
    filtered = client.get("/api/applications", headers=headers, params={"event_id": event.id, "status": "accepted"})
    assert [item["id"] for item in filtered.json()["data"]] == [app_1.id]

    assert client.put(f"/api/applications/{app_2.id}", headers=headers, json={"status": "lost"}).status_code == 400
    assert client.put("/api/applications/missing", headers=headers, json={"status": "accepted"}).status_code == 404

    assert client.delete(f"/api/applications/{app_2.id}", headers=headers).status_code == 204
    assert client.delete(f"/api/applications/{app_2.id}", headers=headers).status_code == 404


@pytest.mark.parametrize("month, expected", [(12, 1), (11, 0)])
def test_ledger_month_listing(client, run_db, month, expected):
    hotel, _, _, event, _, _ = _seed_event(run_db)
    client.post(f"/api/events/{event.id}/finish", headers=auth_headers(hotel))

    async def _backdate(session):
        rows = await session.execute(select(models.WalletTransaction))
        for row in rows.scalars():
            row.transaction_date = datetime(2026, 12, 24, 9, 0, tzinfo=timezone.utc)

    run_db(_backdate)

    response = client.get(f"/api/wallet-transactions/month/2026/{month}", headers=auth_headers(hotel))

    assert response.status_code == 200
    assert len(response.json()["data"]) == expected
    assert response.json()["range"]["start"].startswith(f"2026-{month:02d}-01")


def test_ledger_pages_and_hotel_listing(client, run_db):
    hotel, worker_1, _, event, _, _ = _seed_event(run_db)
    headers = auth_headers(hotel)
    client.post(f"/api/events/{event.id}/finish", headers=headers)

    page = client.get("/api/wallet-transactions", headers=headers, params={"page": 1, "limit": 10})
    assert page.json()["count"] == 1
    assert page.json()["page"] == 1
    assert len(page.json()["data"]) == 1
    assert client.get("/api/wallet-transactions", headers=headers, params={"page": 2}).json()["data"] == []

    hotel_id = client.post("/api/hotels", headers=headers, json={"email": "hr@grand.example", "name": "Grand"}).json()["id"]
    assert client.get(f"/api/wallet-transactions/hotel/{hotel_id}", headers=headers).json()["data"] == []
    client.put(f"/api/users/{worker_1.id}", headers=headers, json={"hotel_id": hotel_id})
    linked = client.get(f"/api/wallet-transactions/hotel/{hotel_id}", headers=headers)
    assert len(linked.json()["data"]) == 1

    assert client.get("/api/wallet-transactions/month/2026/13", headers=headers).status_code == 400
