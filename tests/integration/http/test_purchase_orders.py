from __future__ import annotations

import base64
from decimal import Decimal

DEFAULT_PASSKEY = "1234"

ORDER = {
    "vendor": "Feed Co",
    "items": [
        {"name": "Bran", "qty": "10", "unit": "bag", "price": "100"},
        {"name": "Salt", "qty": "5", "unit": "kg", "price": "50"},
    ],
}


async def _create_order(client, headers_for):
    resp = await client.post(
        "/api/v1/purchase-orders/",
        json=ORDER,
        headers=headers_for("manager", passkey=DEFAULT_PASSKEY),
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


async def test_create_requires_passkey(client, headers_for):
    resp = await client.post(
        "/api/v1/purchase-orders/", json=ORDER, headers=headers_for("manager")
    )
    assert resp.status_code == 403
    assert resp.json()["code"] == "passkey_invalid"


async def test_create_numbers_and_totals(client, headers_for):
    first = await _create_order(client, headers_for)
    second = await _create_order(client, headers_for)

    assert first["po_number"] == "PO-000001"
    assert second["po_number"] == "PO-000002"
    assert first["status"] == "Pending"
    assert Decimal(first["total_amount"]) == Decimal("1250")
    assert [i["item_id"] for i in first["items"]] == [1, 2]


async def test_partial_then_full_receiving(client, headers_for):
    order = await _create_order(client, headers_for)
    url = f"/api/v1/purchase-orders/{order['id']}"
    headers = headers_for("manager", passkey=DEFAULT_PASSKEY)

    partial = await client.post(
        f"{url}/receive", json={"received_quantities": {"1": "10"}}, headers=headers
    )
    assert partial.status_code == 200, partial.text
    body = partial.json()
    assert body["status"] == "Partially Received"
    assert [Decimal(line["received_qty"]) for line in body["record"]["items"]] == [
        Decimal("10"),
        Decimal("0"),
    ]

    full = await client.post(
        f"{url}/receive", json={"received_quantities": {"1": "10", "2": "6"}}, headers=headers
    )
    assert full.json()["status"] == "Received"

    history = await client.get(f"{url}/receivings", headers=headers_for("worker"))
    assert [r["status"] for r in history.json()] == ["Partially Received", "Received"]

    again = await client.post(
        f"{url}/receive", json={"received_quantities": {"1": "1"}}, headers=headers
    )
    assert again.status_code == 409

    fetched = await client.get(url, headers=headers_for("worker"))
    edit = await client.put(
        url,
        json={"version": fetched.json()["version"], "vendor": "Other"},
        headers=headers,
    )
    assert edit.status_code == 409


async def test_edit_recomputes_total_and_checks_version(client, headers_for):
    order = await _create_order(client, headers_for)
    url = f"/api/v1/purchase-orders/{order['id']}"
    headers = headers_for("manager", passkey=DEFAULT_PASSKEY)

    edited = await client.put(
        url,
        json={
            "version": order["version"],
            "items": [{"item_id": 1, "name": "Bran", "qty": "2", "unit": "bag", "price": "100"}],
        },
        headers=headers,
    )
    assert edited.status_code == 200, edited.text
    assert Decimal(edited.json()["total_amount"]) == Decimal("200")

    stale = await client.put(
        url, json={"version": order["version"], "vendor": "Late"}, headers=headers
    )
    assert stale.status_code == 409


async def test_pdf_and_delete(client, headers_for):
    order = await _create_order(client, headers_for)
    url = f"/api/v1/purchase-orders/{order['id']}"

    pdf = await client.get(f"{url}/pdf", headers=headers_for("worker", passkey=DEFAULT_PASSKEY))
    assert pdf.status_code == 200, pdf.text
    assert base64.b64decode(pdf.json()["content"]).startswith(b"%PDF")

    denied = await client.delete(url, headers=headers_for("manager", passkey=DEFAULT_PASSKEY))
    assert denied.status_code == 403

    deleted = await client.delete(url, headers=headers_for("admin", passkey=DEFAULT_PASSKEY))
    assert deleted.status_code == 204
    missing = await client.get(url, headers=headers_for("admin"))
    assert missing.status_code == 404
