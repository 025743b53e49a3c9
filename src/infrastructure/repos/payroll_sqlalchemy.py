from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.payroll import (
    EmployeePaymentsRepository,
    EmployeesRepository,
)
from src.domain.models.employee import Employee, EmployeePayment, PaymentStatus
from src.infrastructure.db.orm.payroll import EmployeeORM, EmployeePaymentORM


class EmployeesSQLAlchemyRepository(EmployeesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: EmployeeORM) -> Employee:
        return Employee(
            id=orm.id,
            tenant_id=orm.tenant_id,
            name=orm.name,
            role=orm.role,
            salary=Decimal(orm.salary),
            created_at=orm.created_at,
        )

    async def add(self, employee: Employee) -> Employee:
        orm = EmployeeORM(
            id=employee.id,
            tenant_id=employee.tenant_id,
            name=employee.name,
            role=employee.role,
            salary=employee.salary,
            created_at=employee.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, tenant_id: UUID, employee_id: UUID) -> Employee | None:
        result = await self.session.execute(
            select(EmployeeORM).where(
                EmployeeORM.tenant_id == tenant_id, EmployeeORM.id == employee_id
            )
        )
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self, tenant_id: UUID) -> list[Employee]:
        result = await self.session.execute(
            select(EmployeeORM).where(EmployeeORM.tenant_id == tenant_id).order_by(EmployeeORM.name)
        )
        return [self._to_domain(r) for r in result.scalars().all()]

    async def delete(self, tenant_id: UUID, employee_id: UUID) -> bool:
        result = await self.session.execute(
            delete(EmployeeORM).where(
                EmployeeORM.tenant_id == tenant_id, EmployeeORM.id == employee_id
            )
        )
        return result.rowcount > 0


class EmployeePaymentsSQLAlchemyRepository(EmployeePaymentsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: EmployeePaymentORM) -> EmployeePayment:
        return EmployeePayment(
            id=orm.id,
            tenant_id=orm.tenant_id,
            employee_id=orm.employee_id,
            employee_name=orm.employee_name,
            amount=Decimal(orm.amount),
            date=orm.date,
            status=orm.status,
            created_at=orm.created_at,
        )

    async def add(self, payment: EmployeePayment) -> EmployeePayment:
        orm = EmployeePaymentORM(
            id=payment.id,
            tenant_id=payment.tenant_id,
            employee_id=payment.employee_id,
            employee_name=payment.employee_name,
            amount=payment.amount,
            date=payment.date,
            status=payment.status,
            created_at=payment.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, tenant_id: UUID, payment_id: UUID) -> EmployeePayment | None:
        result = await self.session.execute(
            select(EmployeePaymentORM).where(
                EmployeePaymentORM.tenant_id == tenant_id, EmployeePaymentORM.id == payment_id
            )
        )
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self, tenant_id: UUID, *, employee_id: UUID | None = None
    ) -> list[EmployeePayment]:
        stmt = select(EmployeePaymentORM).where(EmployeePaymentORM.tenant_id == tenant_id)
        if employee_id is not None:
            stmt = stmt.where(EmployeePaymentORM.employee_id == employee_id)
        stmt = stmt.order_by(EmployeePaymentORM.date.desc(), EmployeePaymentORM.created_at.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def set_status(
        self, tenant_id: UUID, payment_id: UUID, status: PaymentStatus
    ) -> EmployeePayment | None:
        stmt = (
            update(EmployeePaymentORM)
            .where(EmployeePaymentORM.tenant_id == tenant_id, EmployeePaymentORM.id == payment_id)
            .values(status=status)
            .returning(EmployeePaymentORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
