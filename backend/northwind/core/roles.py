from enum import Enum

from northwind.core.errors import InvalidRole


class Role(str, Enum):
    ADMIN = "Admin"
    SUPPLIER_ADMIN = "SupplierAdmin"
    SUPPLIER = "Supplier"
    CUSTOMER = "Customer"
    SHIPPER = "Shipper"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value) -> "Role":
        """
        The one place a role string becomes a Role, used both for request
        payloads and for the role claim of an access token. Case-insensitive.
        """
        if isinstance(value, cls):
            return value
        text = (value or "").strip().lower()
        for role in cls:
            if role.value.lower() == text:
                return role
        raise InvalidRole(f"Invalid role '{value}'. Expected one of: {', '.join(r.value for r in cls)}")
