from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.interfaces.unit_of_work import UnitOfWork

_REPOSITORY_ATTRS = (
    "users",
    "memberships",
    "farm_profiles",
    "customers",
    "shift_records",
    "farm_production",
    "cash_entries",
    "expenses",
    "animals",
    "medical_records",
    "notes",
    "consumption",
    "employees",
    "employee_payments",
    "purchase_orders",
)


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self._reset_repositories()

    def _reset_repositories(self) -> None:
        for attr in _REPOSITORY_ATTRS:
            setattr(self, attr, None)

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from src.infrastructure.repos.animals_sqlalchemy import (
            AnimalsSQLAlchemyRepository,
            MedicalRecordsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.customers_sqlalchemy import CustomersSQLAlchemyRepository
        from src.infrastructure.repos.farm_production_sqlalchemy import (
            FarmProductionSQLAlchemyRepository,
        )
        from src.infrastructure.repos.farm_profiles_sqlalchemy import (
            FarmProfilesSQLAlchemyRepository,
        )
        from src.infrastructure.repos.ledger_sqlalchemy import (
            CashEntriesSQLAlchemyRepository,
            ExpensesSQLAlchemyRepository,
        )
        from src.infrastructure.repos.memberships_sqlalchemy import MembershipsSQLAlchemyRepository
        from src.infrastructure.repos.payroll_sqlalchemy import (
            EmployeePaymentsSQLAlchemyRepository,
            EmployeesSQLAlchemyRepository,
        )
        from src.infrastructure.repos.purchase_orders_sqlalchemy import (
            PurchaseOrdersSQLAlchemyRepository,
        )
        from src.infrastructure.repos.shift_records_sqlalchemy import (
            ShiftRecordsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.tools_sqlalchemy import (
            ConsumptionSQLAlchemyRepository,
            NotesSQLAlchemyRepository,
        )
        from src.infrastructure.repos.users_sqlalchemy import UsersSQLAlchemyRepository

        self.users = UsersSQLAlchemyRepository(self.session)
        self.memberships = MembershipsSQLAlchemyRepository(self.session)
        self.farm_profiles = FarmProfilesSQLAlchemyRepository(self.session)
        self.customers = CustomersSQLAlchemyRepository(self.session)
        self.shift_records = ShiftRecordsSQLAlchemyRepository(self.session)
        self.farm_production = FarmProductionSQLAlchemyRepository(self.session)
        self.cash_entries = CashEntriesSQLAlchemyRepository(self.session)
        self.expenses = ExpensesSQLAlchemyRepository(self.session)
        self.animals = AnimalsSQLAlchemyRepository(self.session)
        self.medical_records = MedicalRecordsSQLAlchemyRepository(self.session)
        self.notes = NotesSQLAlchemyRepository(self.session)
        self.consumption = ConsumptionSQLAlchemyRepository(self.session)
        self.employees = EmployeesSQLAlchemyRepository(self.session)
        self.employee_payments = EmployeePaymentsSQLAlchemyRepository(self.session)
        self.purchase_orders = PurchaseOrdersSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self._reset_repositories()

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
