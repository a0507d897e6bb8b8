from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .rules import Priority, TicketCategory
from .state import TicketStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class Ticket:
    """Aggregate representing a support ticket entry."""

    id: str
    customer_id: str
    description: str
    priority: Priority
    category: TicketCategory = TicketCategory.GENERAL
    status: TicketStatus = TicketStatus.OPEN
    assigned_to: str = ""
    tags: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)

    def add_tag(self, tag: str) -> None:
        self.tags.append(tag)
