from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.animals import (
    AnimalRepository,
    MedicalRecordsRepository,
)
from src.application.interfaces.repositories.customers import CustomersRepository
from src.application.interfaces.repositories.farm_production import FarmProductionRepository
from src.application.interfaces.repositories.farm_profiles import FarmProfilesRepository
from src.application.interfaces.repositories.ledger import (
    CashEntriesRepository,
    ExpensesRepository,
)
from src.application.interfaces.repositories.memberships import MembershipRepository
from src.application.interfaces.repositories.payroll import (
    EmployeePaymentsRepository,
    EmployeesRepository,
)
from src.application.interfaces.repositories.purchase_orders import PurchaseOrdersRepository
from src.application.interfaces.repositories.shift_records import ShiftRecordsRepository
from src.application.interfaces.repositories.tools import ConsumptionRepository, NotesRepository
from src.application.interfaces.repositories.users import UserRepository


class UnitOfWork(Protocol):
    users: UserRepository
    memberships: MembershipRepository
    farm_profiles: FarmProfilesRepository
    customers: CustomersRepository
    shift_records: ShiftRecordsRepository
    farm_production: FarmProductionRepository
    cash_entries: CashEntriesRepository
    expenses: ExpensesRepository
    animals: AnimalRepository
    medical_records: MedicalRecordsRepository
    notes: NotesRepository
    consumption: ConsumptionRepository
    employees: EmployeesRepository
    employee_payments: EmployeePaymentsRepository
    purchase_orders: PurchaseOrdersRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
