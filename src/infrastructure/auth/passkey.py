"""Second-factor confirmation for destructive or sensitive farm actions.

Each farm has a 4-digit passkey. Routes that perform a protected action ask
the policy whether confirmation is needed and, if so, hand the submitted
secret to the verifier. Business logic never sees the passkey itself.
"""

from __future__ import annotations

import logging
import secrets
from collections.abc import Iterable
from enum import Enum
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.infrastructure.auth.password import PasswordHasher

logger = logging.getLogger(__name__)

PASSKEY_LENGTH = 4


class ProtectedAction(str, Enum):
    DELETE_CUSTOMER = "delete_customer"
    SET_CUSTOMER_DEBIT = "set_customer_debit"
    CLEAR_CUSTOMER_DEBIT = "clear_customer_debit"
    DELETE_ANIMAL = "delete_animal"
    DELETE_MEDICAL_RECORD = "delete_medical_record"
    DELETE_CASH_ENTRY = "delete_cash_entry"
    DELETE_EXPENSE = "delete_expense"
    DELETE_EMPLOYEE = "delete_employee"
    CREATE_PURCHASE_ORDER = "create_purchase_order"
    EDIT_PURCHASE_ORDER = "edit_purchase_order"
    DELETE_PURCHASE_ORDER = "delete_purchase_order"
    RECEIVE_PURCHASE_ORDER = "receive_purchase_order"
    PURCHASE_ORDER_PDF = "purchase_order_pdf"
    CHANGE_PASSKEY = "change_passkey"


class PasskeyPolicy:
    def __init__(self, protected: Iterable[ProtectedAction] | None = None) -> None:
        self._protected = frozenset(ProtectedAction if protected is None else protected)

    def requires_confirmation(self, action: ProtectedAction) -> bool:
        return action in self._protected


def validate_passkey_format(passkey: str) -> str:
    value = (passkey or "").strip()
    if len(value) != PASSKEY_LENGTH or not value.isdigit():
        raise ValidationError(f"Passkey must be exactly {PASSKEY_LENGTH} digits")
    return value


class PasskeyVerifier:
    def __init__(self, hasher: PasswordHasher, default_passkey: str) -> None:
        self._hasher = hasher
        self._default_passkey = default_passkey

    def hash(self, passkey: str) -> str:
        return self._hasher.hash(validate_passkey_format(passkey))

    def matches(self, secret: str | None, stored_hash: str | None) -> bool:
        if not secret:
            return False
        if stored_hash:
            return self._hasher.verify(secret, stored_hash)
        return secrets.compare_digest(secret.encode(), self._default_passkey.encode())

    async def confirm(self, uow: UnitOfWork, tenant_id: UUID, secret: str | None) -> bool:
        profile = await uow.farm_profiles.get(tenant_id)
        ok = self.matches(secret, profile.passkey_hash if profile else None)
        if not ok:
            logger.info("Passkey rejected for tenant %s", tenant_id)
        return ok
