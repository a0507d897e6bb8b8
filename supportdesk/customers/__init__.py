"""Customer registration domain."""

from .models import Customer, CustomerType, get_type_name, get_type_prefix
from .repository import CustomerRepository, InMemoryCustomerRepository
from .service import CustomerService

__all__ = [
    "Customer",
    "CustomerRepository",
    "CustomerService",
    "CustomerType",
    "InMemoryCustomerRepository",
    "get_type_name",
    "get_type_prefix",
]
