from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

from jose import jwt
from jose.exceptions import JWTError

from src.application.errors import AuthError
from src.domain.value_objects.role import Role

TOKEN_TYPE = "farm-access"


class JWTService:
    """Signs and checks the bearer tokens handed out at login.

    A token names the user and, when the login asked for one, the farm it was
    pinned to. The farm actually used per request still comes from the tenant
    header and the user's memberships.
    """

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str,
        access_token_expires_minutes: int,
        issuer: str | None = None,
        audience: str | None = None,
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.lifetime = timedelta(minutes=access_token_expires_minutes)
        self.issuer = issuer
        self.audience = audience

    def issue_access_token(
        self,
        user_id: UUID,
        *,
        email: str | None = None,
        farm_id: UUID | None = None,
        role: Role | None = None,
    ) -> str:
        issued_at = datetime.now(timezone.utc)
        claims: dict[str, Any] = {
            "sub": str(user_id),
            "typ": TOKEN_TYPE,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.lifetime).timestamp()),
        }
        optional = {
            "iss": self.issuer,
            "aud": self.audience,
            "email": email,
            "tenant_id": str(farm_id) if farm_id else None,
            "role": role.value if role else None,
        }
        claims.update({key: value for key, value in optional.items() if value})
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        try:
            claims = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
            )
        except JWTError as exc:
            raise AuthError("Token validation failed") from exc
        if claims.get("typ") != TOKEN_TYPE:
            raise AuthError("Invalid access token")
        return claims

    @staticmethod
    def user_id(claims: dict[str, Any]) -> UUID:
        try:
            return UUID(str(claims.get("sub")))
        except ValueError as exc:
            raise AuthError("Token subject is not a valid UUID") from exc
