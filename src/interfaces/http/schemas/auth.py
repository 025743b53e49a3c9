from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from src.domain.value_objects.role import Role


class MembershipSchema(BaseModel):
    tenant_id: UUID
    role: Role


class MeResponse(BaseModel):
    user_id: UUID
    email: EmailStr
    full_name: str | None = None
    active_tenant: UUID
    active_role: Role
    farm_name: str | None = None
    memberships: list[MembershipSchema]
    claims: dict[str, Any]


class LoginRequest(BaseModel):
    email: EmailStr
    password: str
    tenant_id: UUID | None = Field(default=None, description="Optional farm to pin role claims")


class LoginResponse(BaseModel):
    access_token: str
    token_type: str
    user_id: UUID
    email: EmailStr
    memberships: list[MembershipSchema]
