from __future__ import annotations

from uuid import uuid4

import pytest
from jose import jwt

from src.application.errors import AuthError
from src.domain.value_objects.role import Role
from src.infrastructure.auth.jwt_service import JWTService


def make_service(**overrides) -> JWTService:
    options = {
        "secret_key": "unit-test-secret",
        "algorithm": "HS256",
        "access_token_expires_minutes": 5,
    }
    options.update(overrides)
    return JWTService(**options)


def test_token_pinned_to_farm_carries_role():
    service = make_service()
    user_id, farm_id = uuid4(), uuid4()

    token = service.issue_access_token(
        user_id, email="a@example.com", farm_id=farm_id, role=Role.MANAGER
    )
    claims = service.decode(token)

    assert service.user_id(claims) == user_id
    assert claims["tenant_id"] == str(farm_id)
    assert claims["role"] == "MANAGER"
    assert claims["email"] == "a@example.com"


def test_unpinned_token_has_no_farm_claims():
    service = make_service()
    claims = service.decode(service.issue_access_token(uuid4()))
    assert "tenant_id" not in claims
    assert "role" not in claims


def test_token_signed_with_other_secret_is_rejected():
    token = make_service(secret_key="someone-else").issue_access_token(uuid4())
    with pytest.raises(AuthError):
        make_service().decode(token)


def test_token_of_another_type_is_rejected():
    token = jwt.encode({"sub": str(uuid4()), "typ": "refresh"}, "unit-test-secret", "HS256")
    with pytest.raises(AuthError):
        make_service().decode(token)


def test_non_uuid_subject_is_rejected():
    with pytest.raises(AuthError):
        JWTService.user_id({"sub": "not-a-uuid"})
