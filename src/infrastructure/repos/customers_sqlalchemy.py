from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.customers import CustomersRepository
from src.domain.models.customer import Customer
from src.infrastructure.db.orm.customer import CustomerORM


class CustomersSQLAlchemyRepository(CustomersRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: CustomerORM) -> Customer:
        return Customer(
            id=orm.id,
            tenant_id=orm.tenant_id,
            customer_code=orm.customer_code,
            name=orm.name,
            phone=orm.phone,
            cow_rate=Decimal(orm.cow_rate) if orm.cow_rate is not None else None,
            buffalo_rate=Decimal(orm.buffalo_rate) if orm.buffalo_rate is not None else None,
            debit_amount=Decimal(orm.debit_amount or 0),
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, customer: Customer) -> Customer:
        orm = CustomerORM(
            id=customer.id,
            tenant_id=customer.tenant_id,
            customer_code=customer.customer_code,
            name=customer.name,
            phone=customer.phone,
            cow_rate=customer.cow_rate,
            buffalo_rate=customer.buffalo_rate,
            debit_amount=customer.debit_amount,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
            version=customer.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                f"Customer code {customer.customer_code} already exists"
            ) from exc
        return self._to_domain(orm)

    async def list(self, tenant_id: UUID) -> list[Customer]:
        stmt = select(CustomerORM).where(CustomerORM.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def get_by_code(self, tenant_id: UUID, customer_code: str) -> Customer | None:
        stmt = select(CustomerORM).where(
            CustomerORM.tenant_id == tenant_id, CustomerORM.customer_code == customer_code
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def update(self, tenant_id: UUID, customer_code: str, data: dict) -> Customer | None:
        stmt = (
            update(CustomerORM)
            .where(CustomerORM.tenant_id == tenant_id, CustomerORM.customer_code == customer_code)
            .values(**data, version=CustomerORM.version + 1)
            .returning(CustomerORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Customer code already exists") from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def set_debit(
        self, tenant_id: UUID, customer_code: str, debit_amount: Decimal
    ) -> Customer | None:
        return await self.update(tenant_id, customer_code, {"debit_amount": debit_amount})

    async def delete(self, tenant_id: UUID, customer_code: str) -> bool:
        stmt = delete(CustomerORM).where(
            CustomerORM.tenant_id == tenant_id, CustomerORM.customer_code == customer_code
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0
