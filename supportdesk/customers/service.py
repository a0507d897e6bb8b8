from __future__ import annotations

from threading import Lock

from opentelemetry import trace

from supportdesk.core.logging import EventLogger, emit_event

from .models import Customer, CustomerType, get_type_name, get_type_prefix
from .repository import CustomerRepository

tracer = trace.get_tracer(__name__)


class CustomerService:
    """Registers customers and reads them back from the repository."""

    ID_PREFIX = "CUST"

    def __init__(
        self,
        repository: CustomerRepository,
        *,
        event_logger: EventLogger | None = None,
        counter_seed: int = 1000,
    ) -> None:
        self._repository = repository
        self._event_logger = event_logger
        self._counter = counter_seed
        self._counter_lock = Lock()

    def _next_id(self) -> str:
        with self._counter_lock:
            self._counter += 1
            return f"{self.ID_PREFIX}-{self._counter}"

    def register_customer(
        self,
        name: str,
        email: str,
        phone: str,
        customer_type: CustomerType = CustomerType.REGULAR,
    ) -> str:
        with tracer.start_as_current_span("customers.register") as span:
            customer_id = self._next_id()
            span.set_attribute("customer.id", customer_id)

            customer = Customer(
                id=customer_id,
                name=get_type_prefix(customer_type) + name,
                email=email,
                phone=phone,
                type=customer_type,
            )
            self._repository.save(customer)

            emit_event(self._event_logger, f"Registered customer {customer_id} ({get_type_name(customer_type)})")
            return customer_id

    def get_customer(self, customer_id: str) -> Customer | None:
        return self._repository.find_by_id(customer_id)

    def get_all_customers(self) -> list[Customer]:
        return self._repository.find_all()
