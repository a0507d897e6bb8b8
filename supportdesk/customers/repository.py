from __future__ import annotations

from supportdesk.core.repository import InMemoryRepository, Repository

from .models import Customer

CustomerRepository = Repository[Customer]


class InMemoryCustomerRepository(InMemoryRepository[Customer]):
    """Process-local customer store."""
