from __future__ import annotations

from dataclasses import replace

from supportdesk.core.repository import InMemoryRepository, Repository

from .models import Ticket

TicketRepository = Repository[Ticket]


class InMemoryTicketRepository(InMemoryRepository[Ticket]):
    """Process-local ticket store."""

    def _copy(self, entity: Ticket) -> Ticket:
        return replace(entity, tags=list(entity.tags))
