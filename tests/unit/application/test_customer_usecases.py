from __future__ import annotations

from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import ConflictError, NotFound, PermissionDenied, ValidationError
from src.application.use_cases.customers import create_customer, delete_customer, set_debit
from src.domain.models.customer import Customer
from src.domain.value_objects.role import Role


class StubCustomers:
    def __init__(self, *existing: Customer) -> None:
        self.by_code = {c.customer_code: c for c in existing}
        self.added: list[Customer] = []

    async def add(self, customer: Customer) -> Customer:
        self.added.append(customer)
        self.by_code[customer.customer_code] = customer
        return customer

    async def get_by_code(self, tenant_id, code):
        return self.by_code.get(code)

    async def set_debit(self, tenant_id, code, debit_amount):
        customer = self.by_code.get(code)
        if customer is None:
            return None
        customer.debit_amount = debit_amount
        return customer

    async def delete(self, tenant_id, code):
        return self.by_code.pop(code, None) is not None


def make_uow(repo: StubCustomers):
    commits: list[int] = []

    async def commit():
        commits.append(1)

    async def rollback():
        return None

    return SimpleNamespace(customers=repo, commit=commit, rollback=rollback, commits=commits)


async def test_create_customer_denies_worker():
    repo = StubCustomers()
    with pytest.raises(PermissionDenied):
        await create_customer.execute(
            make_uow(repo),
            uuid4(),
            Role.WORKER,
            create_customer.CreateCustomerInput(customer_code="1", name="Bashir"),
        )
    assert not repo.added


async def test_create_customer_requires_numeric_code():
    with pytest.raises(ValidationError):
        await create_customer.execute(
            make_uow(StubCustomers()),
            uuid4(),
            Role.MANAGER,
            create_customer.CreateCustomerInput(customer_code="A-1", name="Bashir"),
        )


async def test_create_customer_rejects_duplicate_code():
    tenant = uuid4()
    existing = Customer.create(tenant_id=tenant, customer_code="7", name="Old")
    with pytest.raises(ConflictError):
        await create_customer.execute(
            make_uow(StubCustomers(existing)),
            tenant,
            Role.ADMIN,
            create_customer.CreateCustomerInput(customer_code=" 7 ", name="New"),
        )


async def test_create_customer_with_manager_succeeds():
    repo = StubCustomers()
    uow = make_uow(repo)
    created = await create_customer.execute(
        uow,
        uuid4(),
        Role.MANAGER,
        create_customer.CreateCustomerInput(
            customer_code="12", name=" Rashid ", cow_rate=Decimal("140")
        ),
    )
    assert created.name == "Rashid"
    assert created.debit_amount == Decimal("0")
    assert uow.commits


async def test_set_debit_rejects_negative_amount():
    tenant = uuid4()
    repo = StubCustomers(Customer.create(tenant_id=tenant, customer_code="3", name="A"))
    with pytest.raises(ValidationError):
        await set_debit.execute(make_uow(repo), tenant, Role.ADMIN, "3", Decimal("-1"))


async def test_set_debit_and_clear():
    tenant = uuid4()
    repo = StubCustomers(Customer.create(tenant_id=tenant, customer_code="3", name="A"))
    uow = make_uow(repo)

    updated = await set_debit.execute(uow, tenant, Role.MANAGER, "3", Decimal("250"))
    assert updated.debit_amount == Decimal("250")
    cleared = await set_debit.execute(uow, tenant, Role.MANAGER, "3", Decimal("0"))
    assert cleared.debit_amount == Decimal("0")


async def test_set_debit_unknown_customer():
    with pytest.raises(NotFound):
        await set_debit.execute(
            make_uow(StubCustomers()), uuid4(), Role.ADMIN, "404", Decimal("1")
        )


async def test_delete_requires_admin():
    tenant = uuid4()
    repo = StubCustomers(Customer.create(tenant_id=tenant, customer_code="5", name="A"))
    uow = make_uow(repo)
    with pytest.raises(PermissionDenied):
        await delete_customer.execute(uow, tenant, Role.MANAGER, "5")

    await delete_customer.execute(uow, tenant, Role.ADMIN, "5")
    assert "5" not in repo.by_code
