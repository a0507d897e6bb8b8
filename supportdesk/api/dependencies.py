from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from supportdesk.customers.service import CustomerService
from supportdesk.tickets.service import TicketService


def get_customer_service(request: Request) -> CustomerService:
    service = getattr(request.app.state, "customer_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Customer service is not configured")
    return service


def get_ticket_service(request: Request) -> TicketService:
    service = getattr(request.app.state, "ticket_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Ticket service is not configured")
    return service


CustomerServiceDep = Annotated[CustomerService, Depends(get_customer_service)]
TicketServiceDep = Annotated[TicketService, Depends(get_ticket_service)]
