from __future__ import annotations

import base64
from decimal import Decimal

DEFAULT_PASSKEY = "1234"


async def _create_customer(client, headers, code, name, **rates):
    resp = await client.post(
        "/api/v1/customers/", json={"customer_code": code, "name": name, **rates}, headers=headers
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


async def test_customer_lifecycle_and_duplicate_code(client, headers_for):
    manager = headers_for("manager")
    await _create_customer(client, manager, "12", "Rashid", cow_rate="140")
    await _create_customer(client, manager, "2", "Bashir")

    dup = await client.post(
        "/api/v1/customers/", json={"customer_code": "12", "name": "Other"}, headers=manager
    )
    assert dup.status_code == 409
    assert dup.json()["code"] == "conflict"

    listed = await client.get("/api/v1/customers/", headers=headers_for("worker"))
    assert [c["customer_code"] for c in listed.json()] == ["2", "12"]

    updated = await client.put(
        "/api/v1/customers/2", json={"buffalo_rate": "180"}, headers=manager
    )
    assert updated.status_code == 200, updated.text
    assert Decimal(updated.json()["buffalo_rate"]) == Decimal("180")


async def test_worker_cannot_create_customer(client, headers_for):
    resp = await client.post(
        "/api/v1/customers/",
        json={"customer_code": "1", "name": "X"},
        headers=headers_for("worker"),
    )
    assert resp.status_code == 403


async def test_debit_requires_passkey(client, headers_for):
    await _create_customer(client, headers_for("admin"), "1", "Rashid")

    missing = await client.put(
        "/api/v1/customers/1/debit", json={"debit_amount": "100"}, headers=headers_for("admin")
    )
    assert missing.status_code == 403
    assert missing.json()["code"] == "passkey_invalid"

    wrong = await client.put(
        "/api/v1/customers/1/debit",
        json={"debit_amount": "100"},
        headers=headers_for("admin", passkey="0000"),
    )
    assert wrong.status_code == 403

    ok = await client.put(
        "/api/v1/customers/1/debit",
        json={"debit_amount": "100"},
        headers=headers_for("admin", passkey=DEFAULT_PASSKEY),
    )
    assert ok.status_code == 200, ok.text
    assert Decimal(ok.json()["debit_amount"]) == Decimal("100")

    cleared = await client.delete(
        "/api/v1/customers/1/debit", headers=headers_for("admin", passkey=DEFAULT_PASSKEY)
    )
    assert cleared.status_code == 200, cleared.text
    assert Decimal(cleared.json()["debit_amount"]) == Decimal("0")


async def test_shift_entries_merge_per_shift(client, headers_for):
    worker = headers_for("worker")
    first = await client.put(
        "/api/v1/milk/shift-entries/2024-03-01/cow/morning",
        json={"quantities": {"1": "12", "2": ""}},
        headers=worker,
    )
    assert first.status_code == 200, first.text
    await client.put(
        "/api/v1/milk/shift-entries/2024-03-01/buffalo/evening",
        json={"quantities": {"1": 4}},
        headers=worker,
    )

    day = await client.get("/api/v1/milk/shift-entries/2024-03-01", headers=worker)
    body = day.json()
    assert body["cow_morning"] == {"1": "12"}
    assert body["buffalo_evening"] == {"1": "4"}
    assert body["cow_evening"] == {}

    empty = await client.get("/api/v1/milk/shift-entries/2024-03-09", headers=worker)
    assert empty.status_code == 200
    assert empty.json()["buffalo_morning"] == {}


async def test_customer_report_settles_debit(client, headers_for):
    admin = headers_for("admin")
    await _create_customer(client, admin, "1", "Rashid", cow_rate="50", buffalo_rate="60")
    await _create_customer(client, admin, "2", "Idle", cow_rate="50")
    await client.put(
        "/api/v1/customers/1/debit",
        json={"debit_amount": "2000"},
        headers=headers_for("admin", passkey=DEFAULT_PASSKEY),
    )
    worker = headers_for("worker")
    for path, quantities in (
        ("2024-03-01/cow/morning", {"1": "12", "99": "40"}),
        ("2024-03-02/cow/evening", {"1": "8"}),
        ("2024-03-02/buffalo/morning", {"1": "10"}),
        ("2024-04-01/cow/morning", {"1": "500"}),
    ):
        resp = await client.put(
            f"/api/v1/milk/shift-entries/{path}", json={"quantities": quantities}, headers=worker
        )
        assert resp.status_code == 200, resp.text

    report = await client.post(
        "/api/v1/reports/customers",
        json={"date_from": "2024-03-01", "date_to": "2024-03-31", "format": "json"},
        headers=worker,
    )
    assert report.status_code == 200, report.text
    data = report.json()["data"]
    (row,) = data["rows"]
    assert row["customer_code"] == "1"
    assert row["cow_total"] == 20.0
    assert row["buffalo_total"] == 10.0
    assert row["amount"] == 1600.0
    assert row["final_amount"] == -400.0
    assert data["totals"]["total"] == 30.0


async def test_customer_report_pdf_and_xlsx(client, headers_for):
    admin = headers_for("admin")
    await _create_customer(client, admin, "1", "Rashid", cow_rate="50")
    await client.put(
        "/api/v1/milk/shift-entries/2024-03-01/cow/morning",
        json={"quantities": {"1": "3"}},
        headers=admin,
    )
    for fmt, magic in (("pdf", b"%PDF"), ("xlsx", b"PK")):
        resp = await client.post(
            "/api/v1/reports/customers",
            json={"date_from": "2024-03-01", "date_to": "2024-03-31", "format": fmt},
            headers=admin,
        )
        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["file_name"].endswith(f".{fmt}")
        assert base64.b64decode(body["content"]).startswith(magic)


async def test_statement_and_invalid_period(client, headers_for):
    admin = headers_for("admin")
    await _create_customer(client, admin, "4", "Nadia", cow_rate="100")
    await client.put(
        "/api/v1/milk/shift-entries/2024-03-05/cow/evening",
        json={"quantities": {"4": "2.5"}},
        headers=admin,
    )

    statement = await client.post(
        "/api/v1/reports/customers/4",
        json={"date_from": "2024-03-01", "date_to": "2024-03-31", "format": "json"},
        headers=admin,
    )
    assert statement.status_code == 200, statement.text
    data = statement.json()["data"]
    assert [r["date"] for r in data["rows"]] == ["2024-03-05"]
    assert data["billing"]["amount"] == 250.0

    missing = await client.post(
        "/api/v1/reports/customers/404",
        json={"date_from": "2024-03-01", "date_to": "2024-03-31", "format": "json"},
        headers=admin,
    )
    assert missing.status_code == 404

    reversed_period = await client.post(
        "/api/v1/reports/customers",
        json={"date_from": "2024-03-31", "date_to": "2024-03-01", "format": "json"},
        headers=admin,
    )
    assert reversed_period.status_code == 422
    assert reversed_period.json()["code"] == "validation_error"
