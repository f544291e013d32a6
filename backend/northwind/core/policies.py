# backend/northwind/core/policies.py

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from northwind.core.roles import Role


@dataclass(frozen=True)
class Principal:
    """Who is calling: the identifier and role claims of a validated access token."""

    identifier: str
    role: Role


class Policy(str, Enum):
    ADMIN = "Admin"
    SUPPLIER_ADMIN = "SupplierAdmin"
    SUPPLIER = "Supplier"


def is_admin(principal: Principal) -> bool:
    return principal.role is Role.ADMIN


def is_supplier_admin(principal: Principal) -> bool:
    return is_admin(principal) or principal.role is Role.SUPPLIER_ADMIN


def is_supplier(principal: Principal) -> bool:
    return is_supplier_admin(principal) or principal.role is Role.SUPPLIER


POLICIES: dict[Policy, Callable[[Principal], bool]] = {
    Policy.ADMIN: is_admin,
    Policy.SUPPLIER_ADMIN: is_supplier_admin,
    Policy.SUPPLIER: is_supplier,
}


def evaluate(principal: Principal, policy: Policy) -> bool:
    return POLICIES[Policy(policy)](principal)


def can_access_user(principal: Principal, user_identifier: str) -> bool:
    # Admins see everyone; anybody else only their own record
    if is_admin(principal):
        return True
    return principal.identifier == str(user_identifier)
