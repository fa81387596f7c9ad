from typing import List, Optional

from fastapi import APIRouter, Query

from parnaioca.core.common_deps import AdminSessionDep, CustomerServiceDep, SessionDep
from parnaioca.core.service_utils import ensure_exists
from parnaioca.schemas.customer import Customer, CustomerCreate, CustomerUpdate

router = APIRouter()


@router.get("/", response_model=List[Customer])
async def get_customers(
    service: CustomerServiceDep,
    session: SessionDep,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    search: Optional[str] = Query(
        None, description="Search by name, national ID or email"
    ),
    active_only: bool = Query(False),
):
    return await service.get_all(skip, limit, search, active_only)


@router.post("/", response_model=Customer)
async def create_customer(
    customer_data: CustomerCreate,
    service: CustomerServiceDep,
    session: SessionDep,
):
    return await service.create(customer_data, session)


@router.get("/{customer_id}", response_model=Customer)
async def get_customer(
    customer_id: str,
    service: CustomerServiceDep,
    session: SessionDep,
):
    customer = await service.get_by_id(customer_id)
    return ensure_exists(customer, "Customer", customer_id)


@router.put("/{customer_id}", response_model=Customer)
async def update_customer(
    customer_id: str,
    customer_data: CustomerUpdate,
    service: CustomerServiceDep,
    session: SessionDep,
):
    return await service.update(customer_id, customer_data, session)


@router.patch("/{customer_id}/toggle-status", response_model=Customer)
async def toggle_customer_status(
    customer_id: str,
    service: CustomerServiceDep,
    session: AdminSessionDep,
):
    return await service.toggle_status(customer_id, session)
