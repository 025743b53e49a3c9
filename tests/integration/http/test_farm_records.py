from __future__ import annotations

from decimal import Decimal

DEFAULT_PASSKEY = "1234"


async def test_farm_report_combines_production_and_cash(client, headers_for):
    worker = headers_for("worker")
    for day, species, shift, total in (
        ("2024-03-01", "cow", "morning", "40"),
        ("2024-03-01", "buffalo", "evening", "15.5"),
        ("2024-03-02", "cow", "evening", "not a number"),
        ("2024-03-02", "cow", "morning", "35"),
    ):
        resp = await client.put(
            f"/api/v1/milk/farm-production/{day}",
            json={"species": species, "shift": shift, "total": total},
            headers=worker,
        )
        assert resp.status_code == 200, resp.text

    day = await client.get("/api/v1/milk/farm-production/2024-03-01", headers=worker)
    assert Decimal(day.json()["total"]) == Decimal("55.5")

    for entry_date, description, amount, entry_type in (
        ("2024-03-01", "Milk sales", "5000", "Credit"),
        ("2024-03-02", "Diesel", "800", "Debit"),
    ):
        resp = await client.post(
            "/api/v1/cash-entries/",
            json={
                "date": entry_date,
                "description": description,
                "amount": amount,
                "entry_type": entry_type,
            },
            headers=worker,
        )
        assert resp.status_code == 201, resp.text
    expense = await client.post(
        "/api/v1/expenses/",
        json={"date": "2024-03-02", "item": "Bran", "amount": "1200", "category": "Feed"},
        headers=worker,
    )
    assert expense.status_code == 201, expense.text

    report = await client.post(
        "/api/v1/reports/farm",
        json={"date_from": "2024-03-01", "date_to": "2024-03-31", "format": "json"},
        headers=worker,
    )
    assert report.status_code == 200, report.text
    data = report.json()["data"]
    assert [d["date"] for d in data["days"]] == ["2024-03-02", "2024-03-01"]
    assert data["totals"]["total"] == 90.5
    assert data["cash_in"] == 5000.0
    assert data["net_cash"] == 4200.0
    assert data["total_expenses"] == 1200.0


async def test_cash_entries_filter_and_delete(client, headers_for):
    worker = headers_for("worker")
    created = []
    for day in ("2024-02-28", "2024-03-10"):
        resp = await client.post(
            "/api/v1/cash-entries/",
            json={"date": day, "description": "Sale", "amount": "10", "entry_type": "Credit"},
            headers=worker,
        )
        created.append(resp.json())

    march = await client.get(
        "/api/v1/cash-entries/",
        params={"date_from": "2024-03-01", "date_to": "2024-03-31"},
        headers=worker,
    )
    assert [e["date"] for e in march.json()] == ["2024-03-10"]

    url = f"/api/v1/cash-entries/{created[0]['id']}"
    as_worker = await client.delete(url, headers=headers_for("worker", passkey=DEFAULT_PASSKEY))
    assert as_worker.status_code == 403
    without_passkey = await client.delete(url, headers=headers_for("admin"))
    assert without_passkey.status_code == 403
    deleted = await client.delete(url, headers=headers_for("admin", passkey=DEFAULT_PASSKEY))
    assert deleted.status_code == 204


async def test_animals_codes_counts_and_medical(client, headers_for):
    manager = headers_for("manager")
    cow = await client.post(
        "/api/v1/animals/", json={"animal_type": "Cow", "entry_date": "2024-01-05"}, headers=manager
    )
    assert cow.status_code == 201, cow.text
    assert cow.json()["animal_code"] == "1001"
    calf = await client.post(
        "/api/v1/animals/",
        json={"animal_type": "Calf", "subtype": "Buffalo", "entry_date": "2024-02-01"},
        headers=manager,
    )
    assert calf.json()["animal_code"] == "1002"

    bad_calf = await client.post(
        "/api/v1/animals/",
        json={"animal_type": "Calf", "entry_date": "2024-02-01"},
        headers=manager,
    )
    assert bad_calf.status_code == 422

    listed = await client.get("/api/v1/animals/", headers=manager)
    counts = listed.json()["counts"]
    assert counts == {"Cow": 1, "Buffalo": 0, "Calf": 1, "total": 2}

    record = await client.post(
        "/api/v1/medical-records/",
        json={
            "animal_code": "1001",
            "diagnosis": "Mastitis",
            "treatment": "Antibiotics",
            "date": "2024-03-01",
            "cost": "abc",
        },
        headers=manager,
    )
    assert record.status_code == 201, record.text
    assert record.json()["animal_type"] == "Cow"
    assert Decimal(record.json()["cost"]) == Decimal("0")

    unknown = await client.post(
        "/api/v1/medical-records/",
        json={"animal_code": "9999", "diagnosis": "x", "treatment": "y", "date": "2024-03-01"},
        headers=manager,
    )
    assert unknown.status_code == 404


async def test_payroll_payments_and_summary(client, headers_for):
    manager = headers_for("manager")
    employee = await client.post(
        "/api/v1/payroll/employees",
        json={"name": "Imran", "role": "Milker", "salary": "25000"},
        headers=manager,
    )
    assert employee.status_code == 201, employee.text
    employee_id = employee.json()["id"]

    salary = await client.post(
        "/api/v1/payroll/payments",
        json={"employee_id": employee_id, "date": "2024-03-31"},
        headers=manager,
    )
    assert salary.status_code == 201, salary.text
    assert Decimal(salary.json()["amount"]) == Decimal("25000")
    assert salary.json()["status"] == "Pending"
    bonus = await client.post(
        "/api/v1/payroll/payments",
        json={"employee_id": employee_id, "date": "2024-03-31", "amount": "3000"},
        headers=manager,
    )
    assert bonus.status_code == 201, bonus.text

    toggled = await client.post(
        f"/api/v1/payroll/payments/{salary.json()['id']}/toggle", headers=manager
    )
    assert toggled.json()["status"] == "Received"

    summary = await client.get("/api/v1/payroll/summary", headers=manager)
    assert Decimal(summary.json()["paid"]) == Decimal("25000")
    assert Decimal(summary.json()["pending"]) == Decimal("3000")


async def test_notes_and_consumption(client, headers_for):
    worker = headers_for("worker")
    note = await client.post(
        "/api/v1/notes/",
        json={"topic": "Vet visit", "date": "2024-03-03", "description": "Friday"},
        headers=worker,
    )
    assert note.status_code == 201, note.text
    item = await client.post(
        "/api/v1/consumption/",
        json={"name": "Bran", "qty": "2", "unit": "bag", "date": "2024-03-03"},
        headers=worker,
    )
    assert item.status_code == 201, item.text

    assert len((await client.get("/api/v1/notes/", headers=worker)).json()) == 1
    assert (
        await client.delete(f"/api/v1/notes/{note.json()['id']}", headers=worker)
    ).status_code == 403
    assert (
        await client.delete(f"/api/v1/consumption/{item.json()['id']}", headers=headers_for())
    ).status_code == 204
