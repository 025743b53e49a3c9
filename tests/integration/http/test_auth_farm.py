from __future__ import annotations

DEFAULT_PASSKEY = "1234"
TEST_PASSWORD = "s3cret-pass"


async def test_login_returns_token_usable_for_me(client, seeded_memberships, tenant_id, app):
    login = await client.post(
        "/api/v1/auth/login",
        json={"email": "admin@example.com", "password": TEST_PASSWORD},
    )
    assert login.status_code == 200, login.text
    token = login.json()["access_token"]
    assert login.json()["memberships"][0]["role"] == "ADMIN"

    me = await client.get(
        "/api/v1/me",
        headers={
            "Authorization": f"Bearer {token}",
            app.state.settings.tenant_header: str(tenant_id),
        },
    )
    assert me.status_code == 200, me.text
    payload = me.json()
    assert payload["user_id"] == str(seeded_memberships["admin"])
    assert payload["email"] == "admin@example.com"
    assert payload["full_name"] == "Admin"
    assert payload["active_tenant"] == str(tenant_id)
    assert payload["active_role"] == "ADMIN"
    assert payload["farm_name"] is None


async def test_login_with_wrong_password(client, seeded_memberships):
    resp = await client.post(
        "/api/v1/auth/login", json={"email": "admin@example.com", "password": "nope"}
    )
    assert resp.status_code == 401
    assert resp.json()["code"] == "auth_error"


async def test_requests_need_token_and_farm_header(client, headers_for, app):
    no_token = await client.get("/api/v1/customers/")
    assert no_token.status_code == 401

    headers = headers_for("admin")
    headers.pop(app.state.settings.tenant_header)
    no_farm = await client.get("/api/v1/customers/", headers=headers)
    assert no_farm.status_code == 403

    health = await client.get("/api/v1/health")
    assert health.json() == {"status": "ok"}


async def test_profile_appears_on_me(client, headers_for):
    saved = await client.put(
        "/api/v1/farm/profile",
        json={"farm_name": "Green Acres", "city": "Lahore"},
        headers=headers_for("manager"),
    )
    assert saved.status_code == 200, saved.text
    assert saved.json()["has_details"] is True

    me = await client.get("/api/v1/me", headers=headers_for("worker"))
    assert me.json()["farm_name"] == "Green Acres"


async def test_change_passkey(client, headers_for):
    changed = await client.put(
        "/api/v1/farm/passkey",
        json={"new_passkey": "9876"},
        headers=headers_for("admin", passkey=DEFAULT_PASSKEY),
    )
    assert changed.status_code == 204, changed.text

    await client.post(
        "/api/v1/customers/", json={"customer_code": "1", "name": "A"}, headers=headers_for()
    )
    old = await client.delete(
        "/api/v1/customers/1/debit", headers=headers_for("admin", passkey=DEFAULT_PASSKEY)
    )
    assert old.status_code == 403
    new = await client.delete(
        "/api/v1/customers/1/debit", headers=headers_for("admin", passkey="9876")
    )
    assert new.status_code == 200


async def test_manager_cannot_change_passkey(client, headers_for):
    resp = await client.put(
        "/api/v1/farm/passkey",
        json={"new_passkey": "9876"},
        headers=headers_for("manager", passkey=DEFAULT_PASSKEY),
    )
    assert resp.status_code == 403
    assert resp.json()["code"] == "forbidden"
