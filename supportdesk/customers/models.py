from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping


class CustomerType(str, Enum):
    """Commercial tier of a customer, fixed at registration."""

    REGULAR = "regular"
    PREMIUM = "premium"
    VIP = "vip"


@dataclass(frozen=True, slots=True)
class Customer:
    """Registered customer record.

    ``name`` already carries the tier prefix (``"[VIP] Ann"``) applied at
    registration; the prefix is part of the stored value, not metadata.
    """

    id: str
    name: str
    email: str
    phone: str
    type: CustomerType = CustomerType.REGULAR


_TYPE_PREFIXES: Mapping[CustomerType, str] = {
    CustomerType.REGULAR: "",
    CustomerType.PREMIUM: "[PREMIUM] ",
    CustomerType.VIP: "[VIP] ",
}

_TYPE_NAMES: Mapping[CustomerType, str] = {
    CustomerType.REGULAR: "Regular",
    CustomerType.PREMIUM: "Premium",
    CustomerType.VIP: "VIP",
}


def get_type_prefix(customer_type: CustomerType) -> str:
    """Return the display prefix baked into the name of ``customer_type`` customers."""

    return _TYPE_PREFIXES.get(customer_type, "")


def get_type_name(customer_type: CustomerType) -> str:
    return _TYPE_NAMES.get(customer_type, "Regular")
