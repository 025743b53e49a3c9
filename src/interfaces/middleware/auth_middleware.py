from __future__ import annotations

import logging
from typing import Iterable
from uuid import UUID

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from src.application.errors import AuthError, PermissionDenied
from src.config.settings import Settings
from src.infrastructure.auth.context import (
    AuthContext,
    fetch_memberships,
    fetch_user,
    select_active_role,
)
from src.interfaces.middleware.error_handler import error_payload

logger = logging.getLogger(__name__)

PUBLIC_PATHS: Iterable[str] = (
    "/api/v1/health",
    "/api/v1/auth/login",
    "/docs",
    "/openapi.json",
    "/redoc",
)


def _bearer_token(request: Request) -> str:
    authorization = request.headers.get("Authorization")
    if not authorization:
        raise AuthError("Missing Authorization header")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise AuthError("Invalid Authorization header")
    return token


def _tenant_id(request: Request, header: str) -> UUID:
    value = request.headers.get(header)
    if not value:
        raise PermissionDenied("Missing farm header")
    try:
        return UUID(value)
    except ValueError as exc:
        raise PermissionDenied("Invalid farm identifier") from exc


class AuthMiddleware(BaseHTTPMiddleware):
    """Resolves the caller and their role on the farm named by the tenant header."""

    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next) -> Response:
        # Let CORS preflight pass without auth checks
        if request.method == "OPTIONS":
            return await call_next(request)
        if any(request.url.path.startswith(path) for path in PUBLIC_PATHS):
            return await call_next(request)

        try:
            token = _bearer_token(request)
            tenant_id = _tenant_id(request, self.settings.tenant_header)
            claims = request.app.state.jwt_service.decode(token)
            user_id = request.app.state.jwt_service.user_id(claims)
            async with request.app.state.session_factory() as session:
                user = await fetch_user(session, user_id)
                if not user or not user.is_active:
                    raise AuthError("Inactive or missing user")
                memberships = await fetch_memberships(session, user_id)
            request.state.auth_context = AuthContext(
                user_id=user_id,
                email=user.email,
                tenant_id=tenant_id,
                role=select_active_role(memberships, tenant_id),
                memberships=memberships,
                claims=claims,
            )
        except (AuthError, PermissionDenied) as exc:
            logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
            return JSONResponse(status_code=exc.status_code, content=error_payload(exc))
        return await call_next(request)
