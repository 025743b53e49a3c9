from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable

from fastapi import Depends, Request

from src.application.errors import AuthError, PasskeyError
from src.config.settings import Settings, get_settings
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.passkey import PasskeyPolicy, PasskeyVerifier, ProtectedAction
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.infrastructure.reports.report_service import ReportService


async def get_auth_context(request: Request) -> AuthContext:
    context = getattr(request.state, "auth_context", None)
    if context is None:
        raise AuthError("Authentication required")
    return context


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_password_hasher(request: Request) -> PasswordHasher:
    hasher = getattr(request.app.state, "password_hasher", None)
    if hasher is None:
        raise RuntimeError("Password hasher not configured")
    return hasher


def get_jwt_service(request: Request) -> JWTService:
    service = getattr(request.app.state, "jwt_service", None)
    if service is None:
        raise RuntimeError("JWT service not configured")
    return service


def get_passkey_policy(request: Request) -> PasskeyPolicy:
    policy = getattr(request.app.state, "passkey_policy", None)
    if policy is None:
        raise RuntimeError("Passkey policy not configured")
    return policy


def get_passkey_verifier(request: Request) -> PasskeyVerifier:
    verifier = getattr(request.app.state, "passkey_verifier", None)
    if verifier is None:
        raise RuntimeError("Passkey verifier not configured")
    return verifier


def get_report_service(request: Request) -> ReportService:
    service = getattr(request.app.state, "report_service", None)
    if service is None:
        raise RuntimeError("Report service not configured")
    return service


def require_passkey(action: ProtectedAction) -> Callable[..., Awaitable[None]]:
    """Dependency that checks the passkey header when ``action`` is protected."""

    async def _check(
        request: Request,
        context: AuthContext = Depends(get_auth_context),
        uow=Depends(get_uow),
        settings: Settings = Depends(get_app_settings),
        policy: PasskeyPolicy = Depends(get_passkey_policy),
        verifier: PasskeyVerifier = Depends(get_passkey_verifier),
    ) -> None:
        if not policy.requires_confirmation(action):
            return
        secret = request.headers.get(settings.passkey_header)
        if not secret:
            raise PasskeyError("Passkey required for this action", details={"action": action.value})
        if not await verifier.confirm(uow, context.tenant_id, secret):
            raise PasskeyError("Incorrect passkey", details={"action": action.value})

    return _check
