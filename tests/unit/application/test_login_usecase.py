from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from src.application.errors import AuthError
from src.application.use_cases.auth import login_user
from src.domain.models.user import User
from src.infrastructure.auth.jwt_service import JWTService


class StubUsers:
    def __init__(self, user: User) -> None:
        self.user = user

    async def get_by_email(self, email):
        return self.user if email == self.user.email else None


class StubMemberships:
    async def list_for_user(self, user_id):
        return []


class RejectingHasher:
    def verify(self, password, hashed):
        return False


async def test_failed_login_logs_user_id_not_personal_data(caplog):
    user = User.register("dairy.owner@example.com", "hashed", "Dairy Owner")
    uow = SimpleNamespace(users=StubUsers(user), memberships=StubMemberships())
    jwt_service = JWTService(
        secret_key="unit-test-secret", algorithm="HS256", access_token_expires_minutes=5
    )

    with caplog.at_level(logging.INFO), pytest.raises(AuthError):
        await login_user.execute(
            uow=uow,
            payload=login_user.LoginInput(email=user.email, password="wrong"),
            password_hasher=RejectingHasher(),
            jwt_service=jwt_service,
        )

    assert str(user.id) in caplog.text
    assert "dairy.owner" not in caplog.text
    assert "Dairy Owner" not in caplog.text
