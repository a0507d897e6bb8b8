"""Ticket service domain models and services."""

from .models import Ticket
from .repository import InMemoryTicketRepository, TicketRepository
from .rules import Priority, TicketCategory
from .service import TicketService
from .state import TicketStateMachine, TicketStatus

__all__ = [
    "InMemoryTicketRepository",
    "Priority",
    "Ticket",
    "TicketCategory",
    "TicketRepository",
    "TicketService",
    "TicketStateMachine",
    "TicketStatus",
]
