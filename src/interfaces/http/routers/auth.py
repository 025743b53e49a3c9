from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from src.application.use_cases.auth import get_me, login_user
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher
from src.interfaces.http.deps import (
    get_auth_context,
    get_jwt_service,
    get_password_hasher,
    get_uow,
)
from src.interfaces.http.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MembershipSchema,
    MeResponse,
)

router = APIRouter(prefix="", tags=["auth"])
logger = logging.getLogger(__name__)


@router.get("/me", response_model=MeResponse)
async def read_me(
    context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> MeResponse:
    result = await get_me.execute(
        uow,
        user_id=context.user_id,
        active_tenant=context.tenant_id,
        active_role=context.role,
        memberships=context.memberships,
        claims=context.claims,
    )
    memberships = [MembershipSchema(tenant_id=m.tenant_id, role=m.role) for m in result.memberships]
    return MeResponse(
        user_id=result.user_id,
        email=result.email,
        full_name=result.full_name,
        active_tenant=result.active_tenant,
        active_role=result.active_role,
        farm_name=result.farm_name,
        memberships=memberships,
        claims=result.claims,
    )


@router.post("/auth/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> LoginResponse:
    result = await login_user.execute(
        uow=uow,
        payload=login_user.LoginInput(
            email=payload.email,
            password=payload.password,
            tenant_id=payload.tenant_id,
        ),
        password_hasher=password_hasher,
        jwt_service=jwt_service,
    )
    logger.info("User %s logged in", result.user_id)
    return LoginResponse(
        access_token=result.access_token,
        token_type=result.token_type,
        user_id=result.user_id,
        email=result.email,
        memberships=[MembershipSchema(**m) for m in result.memberships],
    )
