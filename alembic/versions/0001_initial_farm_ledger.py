"""initial farm ledger schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)


def _updated_at() -> sa.Column:
    return sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        _created_at(),
        _updated_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email', name='ux_users_email'),
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=False)

    op.create_table(
        'farm_memberships',
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('role', sa.String(length=7), nullable=False),
        sa.PrimaryKeyConstraint('user_id', 'tenant_id'),
    )

    op.create_table(
        'farm_profiles',
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('farm_name', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('city', sa.String(length=128), nullable=False, server_default=''),
        sa.Column('country', sa.String(length=128), nullable=False, server_default=''),
        sa.Column('contact', sa.String(length=64), nullable=False, server_default=''),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('passkey_hash', sa.String(length=255), nullable=True),
        _updated_at(),
        sa.PrimaryKeyConstraint('tenant_id'),
    )

    op.create_table(
        'customers',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('customer_code', sa.String(length=32), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=64), nullable=True),
        sa.Column('cow_rate', sa.DECIMAL(10, 2), nullable=True),
        sa.Column('buffalo_rate', sa.DECIMAL(10, 2), nullable=True),
        sa.Column('debit_amount', sa.DECIMAL(12, 2), nullable=False, server_default='0'),
        _created_at(),
        _updated_at(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('tenant_id', 'customer_code', name='ux_customers_tenant_code'),
    )
    op.create_index(op.f('ix_customers_tenant_id'), 'customers', ['tenant_id'], unique=False)

    op.create_table(
        'daily_shift_records',
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('cow_morning', sa.JSON(), nullable=False),
        sa.Column('cow_evening', sa.JSON(), nullable=False),
        sa.Column('buffalo_morning', sa.JSON(), nullable=False),
        sa.Column('buffalo_evening', sa.JSON(), nullable=False),
        _updated_at(),
        sa.PrimaryKeyConstraint('tenant_id', 'date'),
    )

    op.create_table(
        'farm_production',
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('cow_morning_total', sa.DECIMAL(12, 3), nullable=False, server_default='0'),
        sa.Column('cow_evening_total', sa.DECIMAL(12, 3), nullable=False, server_default='0'),
        sa.Column('buffalo_morning_total', sa.DECIMAL(12, 3), nullable=False, server_default='0'),
        sa.Column('buffalo_evening_total', sa.DECIMAL(12, 3), nullable=False, server_default='0'),
        _updated_at(),
        sa.PrimaryKeyConstraint('tenant_id', 'date'),
    )

    op.create_table(
        'cash_entries',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('description', sa.String(length=512), nullable=False),
        sa.Column('amount', sa.DECIMAL(12, 2), nullable=False),
        sa.Column('entry_type', sa.String(length=6), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_cash_entries_tenant_id'), 'cash_entries', ['tenant_id'], unique=False)
    op.create_index(op.f('ix_cash_entries_date'), 'cash_entries', ['date'], unique=False)

    op.create_table(
        'expenses',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('item', sa.String(length=255), nullable=False),
        sa.Column('amount', sa.DECIMAL(12, 2), nullable=False),
        sa.Column('category', sa.String(length=11), nullable=False),
        sa.Column('notes', sa.String(length=1024), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_expenses_tenant_id'), 'expenses', ['tenant_id'], unique=False)
    op.create_index(op.f('ix_expenses_date'), 'expenses', ['date'], unique=False)

    op.create_table(
        'animals',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('animal_code', sa.String(length=16), nullable=False),
        sa.Column('animal_type', sa.String(length=7), nullable=False),
        sa.Column('subtype', sa.String(length=7), nullable=True),
        sa.Column('entry_date', sa.Date(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('tenant_id', 'animal_code', name='ux_animals_tenant_code'),
    )
    op.create_index(op.f('ix_animals_tenant_id'), 'animals', ['tenant_id'], unique=False)

    op.create_table(
        'medical_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('animal_code', sa.String(length=16), nullable=False),
        sa.Column('animal_type', sa.String(length=32), nullable=False),
        sa.Column('diagnosis', sa.String(length=512), nullable=False),
        sa.Column('treatment', sa.String(length=1024), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('cost', sa.DECIMAL(12, 2), nullable=False, server_default='0'),
        sa.Column('notes', sa.String(length=1024), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_medical_records_tenant_id'), 'medical_records', ['tenant_id'], unique=False)
    op.create_index(op.f('ix_medical_records_animal_code'), 'medical_records', ['animal_code'], unique=False)

    op.create_table(
        'notes',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('topic', sa.String(length=255), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('remarks', sa.Text(), nullable=False, server_default=''),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_notes_tenant_id'), 'notes', ['tenant_id'], unique=False)

    op.create_table(
        'consumption_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('qty', sa.DECIMAL(12, 3), nullable=False),
        sa.Column('unit', sa.String(length=32), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('notes', sa.String(length=1024), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_consumption_items_tenant_id'), 'consumption_items', ['tenant_id'], unique=False)

    op.create_table(
        'employees',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=128), nullable=False),
        sa.Column('salary', sa.DECIMAL(12, 2), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_employees_tenant_id'), 'employees', ['tenant_id'], unique=False)

    op.create_table(
        'employee_payments',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('employee_id', sa.Uuid(), nullable=False),
        sa.Column('employee_name', sa.String(length=255), nullable=False),
        sa.Column('amount', sa.DECIMAL(12, 2), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(length=8), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_employee_payments_tenant_id'), 'employee_payments', ['tenant_id'], unique=False)
    op.create_index(op.f('ix_employee_payments_employee_id'), 'employee_payments', ['employee_id'], unique=False)

    op.create_table(
        'purchase_orders',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('po_number', sa.String(length=32), nullable=False),
        sa.Column('vendor', sa.String(length=255), nullable=False),
        sa.Column('items', sa.JSON(), nullable=False),
        sa.Column('total_amount', sa.DECIMAL(14, 2), nullable=False),
        sa.Column('status', sa.String(length=32), nullable=False),
        _created_at(),
        _updated_at(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('tenant_id', 'po_number', name='ux_purchase_orders_tenant_number'),
    )
    op.create_index(op.f('ix_purchase_orders_tenant_id'), 'purchase_orders', ['tenant_id'], unique=False)

    op.create_table(
        'receiving_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('purchase_order_id', sa.Uuid(), nullable=False),
        sa.Column('po_number', sa.String(length=32), nullable=False),
        sa.Column('vendor', sa.String(length=255), nullable=False),
        sa.Column('items', sa.JSON(), nullable=False),
        sa.Column('received_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sa.String(length=32), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_receiving_records_tenant_id'), 'receiving_records', ['tenant_id'], unique=False)
    op.create_index(
        op.f('ix_receiving_records_purchase_order_id'), 'receiving_records', ['purchase_order_id'], unique=False
    )


def downgrade() -> None:
    for table in (
        'receiving_records',
        'purchase_orders',
        'employee_payments',
        'employees',
        'consumption_items',
        'notes',
        'medical_records',
        'animals',
        'expenses',
        'cash_entries',
        'farm_production',
        'daily_shift_records',
        'customers',
        'farm_profiles',
        'farm_memberships',
        'users',
    ):
        op.drop_table(table)
