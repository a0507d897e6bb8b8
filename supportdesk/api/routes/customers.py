from __future__ import annotations

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict

from supportdesk.api.dependencies import CustomerServiceDep
from supportdesk.customers.models import CustomerType

router = APIRouter(prefix="/customers", tags=["customers"])


class CustomerCreateRequest(BaseModel):
    name: str
    email: str
    phone: str
    type: CustomerType = CustomerType.REGULAR


class CustomerCreatedResponse(BaseModel):
    id: str


class CustomerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    phone: str
    type: CustomerType


@router.post("", response_model=CustomerCreatedResponse, status_code=status.HTTP_201_CREATED)
def register_customer(payload: CustomerCreateRequest, service: CustomerServiceDep) -> CustomerCreatedResponse:
    customer_id = service.register_customer(payload.name, payload.email, payload.phone, payload.type)
    return CustomerCreatedResponse(id=customer_id)


@router.get("", response_model=list[CustomerResponse], summary="List registered customers")
def list_customers(service: CustomerServiceDep) -> list[CustomerResponse]:
    return [CustomerResponse.model_validate(customer) for customer in service.get_all_customers()]


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(customer_id: str, service: CustomerServiceDep) -> CustomerResponse:
    customer = service.get_customer(customer_id)
    if customer is None:
        raise HTTPException(status_code=404, detail=f"Customer {customer_id} not found")
    return CustomerResponse.model_validate(customer)
