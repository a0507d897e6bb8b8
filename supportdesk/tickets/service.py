from __future__ import annotations

from dataclasses import replace
from threading import Lock

from opentelemetry import trace

from supportdesk.core.logging import EventLogger, emit_event
from supportdesk.customers.repository import CustomerRepository
from supportdesk.notifications.dispatcher import NotificationDispatcher

from .models import Ticket
from .repository import TicketRepository
from .rules import (
    Priority,
    TicketCategory,
    get_auto_assigned_agent,
    get_category_name,
    get_default_tags,
    get_priority_name,
    get_status_name,
)
from .state import TicketStateMachine, TicketStatus

tracer = trace.get_tracer(__name__)


class TicketService:
    """High level orchestration for ticket creation and status updates.

    Not-found conditions are reported through return values: ``create_ticket``
    returns an empty string and ``update_ticket_status`` returns ``False``.
    """

    ID_PREFIX = "TKT"

    def __init__(
        self,
        ticket_repository: TicketRepository,
        customer_repository: CustomerRepository,
        dispatcher: NotificationDispatcher,
        *,
        event_logger: EventLogger | None = None,
        counter_seed: int = 1000,
    ) -> None:
        self._tickets = ticket_repository
        self._customers = customer_repository
        self._dispatcher = dispatcher
        self._event_logger = event_logger
        self._counter = counter_seed
        self._counter_lock = Lock()

    def _next_id(self) -> str:
        with self._counter_lock:
            self._counter += 1
            return f"{self.ID_PREFIX}-{self._counter}"

    def create_ticket(
        self,
        customer_id: str,
        description: str,
        priority: Priority,
        category: TicketCategory = TicketCategory.GENERAL,
    ) -> str:
        with tracer.start_as_current_span("tickets.create") as span:
            customer = self._customers.find_by_id(customer_id)
            if customer is None:
                emit_event(self._event_logger, f"Failed to create ticket: Customer not found - {customer_id}")
                return ""

            ticket_id = self._next_id()
            span.set_attribute("ticket.id", ticket_id)

            ticket = Ticket(
                id=ticket_id,
                customer_id=customer_id,
                description=description,
                priority=priority,
                category=category,
                status=TicketStateMachine.initial_state(),
                assigned_to=get_auto_assigned_agent(priority),
                tags=get_default_tags(category),
            )
            self._tickets.save(ticket)

            category_name = get_category_name(category)
            emit_event(
                self._event_logger,
                f"Ticket created: {ticket_id} for customer {customer.name} "
                f"(Category: {category_name}, Priority: {get_priority_name(priority)})",
            )

            message = (
                f"Your ticket {ticket_id} has been created. "
                f"Category: {category_name}. "
                f"Description: {description}"
            )
            self._dispatcher.notify(customer.email, message)
            return ticket_id

    def update_ticket_status(self, ticket_id: str, new_status: TicketStatus) -> bool:
        with tracer.start_as_current_span("tickets.update_status") as span:
            span.set_attribute("ticket.id", ticket_id)
            ticket = self._tickets.find_by_id(ticket_id)
            if ticket is None:
                emit_event(self._event_logger, f"Failed to update ticket: Ticket not found - {ticket_id}")
                return False

            updated = replace(ticket, status=new_status)
            self._tickets.save(updated)

            status_name = get_status_name(new_status)
            customer = self._customers.find_by_id(updated.customer_id)
            if customer is not None:
                message = f"Your ticket {ticket_id} status has been updated to: {status_name}"
                self._dispatcher.notify(customer.email, message)

            emit_event(self._event_logger, f"Ticket status updated: {ticket_id} to {status_name}")
            return True

    def get_ticket(self, ticket_id: str) -> Ticket | None:
        return self._tickets.find_by_id(ticket_id)

    def get_all_tickets(self) -> list[Ticket]:
        return self._tickets.find_all()
