from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Callable
from pathlib import Path
from typing import cast
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.domain.value_objects.role import Role
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import (  # noqa: F401
    animal,
    customer,
    farm_production,
    farm_profile,
    ledger,
    payroll,
    purchase_order,
    shift_record,
    tools,
)
from src.infrastructure.db.orm.membership import MembershipORM
from src.infrastructure.db.orm.user import UserORM
from src.interfaces.http.main import create_app

DEFAULT_PASSKEY = "1234"
TEST_PASSWORD = "s3cret-pass"


@pytest.fixture(scope="session")
def tenant_id() -> UUID:
    return uuid4()


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "jwt_secret_key": "test-secret",
            "tenant_header": "X-Tenant-ID",
            "log_level": "INFO",
            "environment": "test",
            "default_passkey": DEFAULT_PASSKEY,
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client


@pytest.fixture()
async def seeded_memberships(app, client, tenant_id: UUID) -> dict[str, UUID]:
    ids = {"admin": uuid4(), "manager": uuid4(), "worker": uuid4()}
    roles = {"admin": Role.ADMIN, "manager": Role.MANAGER, "worker": Role.WORKER}
    hashed = app.state.password_hasher.hash(TEST_PASSWORD)
    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        async_session = cast(AsyncSession, session)
        async_session.add_all(
            [
                UserORM(
                    id=user_id,
                    email=f"{name}@example.com",
                    hashed_password=hashed,
                    full_name=name.title(),
                    is_active=True,
                )
                for name, user_id in ids.items()
            ]
        )
        await async_session.flush()
        async_session.add_all(
            [
                MembershipORM(user_id=user_id, tenant_id=tenant_id, role=roles[name])
                for name, user_id in ids.items()
            ]
        )
        await async_session.commit()
    return ids


@pytest.fixture()
def token_factory(app) -> Callable[[UUID], str]:
    def _make(user_id: UUID) -> str:
        return app.state.jwt_service.issue_access_token(user_id)

    return _make


@pytest.fixture()
def headers_for(app, seeded_memberships, tenant_id: UUID, token_factory):
    """Auth headers for one of the seeded roles, optionally with the passkey."""

    def _headers(role: str = "admin", *, passkey: str | None = None) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {token_factory(seeded_memberships[role])}",
            app.state.settings.tenant_header: str(tenant_id),
        }
        if passkey is not None:
            headers[app.state.settings.passkey_header] = passkey
        return headers

    return _headers
