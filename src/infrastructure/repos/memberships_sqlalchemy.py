from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.memberships import MembershipRepository
from src.domain.models.membership import Membership
from src.domain.value_objects.role import Role
from src.infrastructure.db.orm.membership import MembershipORM


class MembershipsSQLAlchemyRepository(MembershipRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, membership: Membership) -> None:
        self.session.add(
            MembershipORM(
                user_id=membership.user_id,
                tenant_id=membership.tenant_id,
                role=membership.role,
            )
        )
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("User already belongs to this farm") from exc

    async def list_for_user(self, user_id: UUID) -> list[Membership]:
        result = await self.session.execute(
            select(MembershipORM).where(MembershipORM.user_id == user_id)
        )
        return [
            Membership(user_id=row.user_id, tenant_id=row.tenant_id, role=row.role)
            for row in result.scalars().all()
        ]

    async def get_role(self, user_id: UUID, tenant_id: UUID) -> Role | None:
        result = await self.session.execute(
            select(MembershipORM.role).where(
                MembershipORM.user_id == user_id, MembershipORM.tenant_id == tenant_id
            )
        )
        return result.scalar_one_or_none()
