from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict

from supportdesk.api.dependencies import TicketServiceDep
from supportdesk.tickets.rules import Priority, TicketCategory
from supportdesk.tickets.state import TicketStatus

router = APIRouter(prefix="/tickets", tags=["tickets"])


class TicketCreateRequest(BaseModel):
    customer_id: str
    description: str
    priority: Priority
    category: TicketCategory = TicketCategory.GENERAL


class TicketCreatedResponse(BaseModel):
    id: str


class TicketStatusChangeRequest(BaseModel):
    status: TicketStatus


class TicketStatusResponse(BaseModel):
    id: str
    status: TicketStatus


class TicketResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: str
    description: str
    status: TicketStatus
    priority: Priority
    category: TicketCategory
    assigned_to: str
    tags: list[str]
    created_at: datetime


@router.post("", response_model=TicketCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_ticket(payload: TicketCreateRequest, service: TicketServiceDep) -> TicketCreatedResponse:
    ticket_id = service.create_ticket(
        payload.customer_id,
        payload.description,
        payload.priority,
        payload.category,
    )
    if not ticket_id:
        raise HTTPException(status_code=404, detail=f"Customer {payload.customer_id} not found")
    return TicketCreatedResponse(id=ticket_id)


@router.get("", response_model=list[TicketResponse], summary="List existing tickets")
def list_tickets(service: TicketServiceDep) -> list[TicketResponse]:
    return [TicketResponse.model_validate(ticket) for ticket in service.get_all_tickets()]


@router.get("/{ticket_id}", response_model=TicketResponse)
def get_ticket(ticket_id: str, service: TicketServiceDep) -> TicketResponse:
    ticket = service.get_ticket(ticket_id)
    if ticket is None:
        raise HTTPException(status_code=404, detail=f"Ticket {ticket_id} not found")
    return TicketResponse.model_validate(ticket)


@router.post("/{ticket_id}/status", response_model=TicketStatusResponse)
def change_ticket_status(
    ticket_id: str,
    payload: TicketStatusChangeRequest,
    service: TicketServiceDep,
) -> TicketStatusResponse:
    if not service.update_ticket_status(ticket_id, payload.status):
        raise HTTPException(status_code=404, detail=f"Ticket {ticket_id} not found")
    return TicketStatusResponse(id=ticket_id, status=payload.status)
