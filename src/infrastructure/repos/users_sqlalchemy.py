from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.users import UserRepository
from src.domain.models.user import User, normalize_email
from src.infrastructure.db.orm.user import UserORM

_COLUMNS = ("id", "email", "hashed_password", "full_name", "is_active", "created_at", "updated_at")


def _to_domain(orm: UserORM) -> User:
    return User(**{name: getattr(orm, name) for name in _COLUMNS})


class UsersSQLAlchemyRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, user: User) -> User:
        orm = UserORM(**{name: getattr(user, name) for name in _COLUMNS})
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Email already registered") from exc
        return _to_domain(orm)

    async def get(self, user_id: UUID) -> User | None:
        orm = await self.session.get(UserORM, user_id)
        return _to_domain(orm) if orm else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserORM).where(UserORM.email == normalize_email(email))
        orm = (await self.session.execute(stmt)).scalar_one_or_none()
        return _to_domain(orm) if orm else None
