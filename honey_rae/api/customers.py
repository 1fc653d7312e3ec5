from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from honey_rae.config import get_settings
from honey_rae.db.store import ServiceStore, get_store
from honey_rae.models.schemas import Customer, CustomerDetail
from honey_rae.services import clock, customer_service

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=list[Customer])
async def get_customers(store: ServiceStore = Depends(get_store)) -> list[Customer]:
    return customer_service.list_customers(store)


@router.get("/inactive", response_model=list[Customer])
async def get_inactive_customers(store: ServiceStore = Depends(get_store)) -> list[Customer]:
    settings = get_settings()
    customers = customer_service.inactive_customers(
        store,
        today=clock.today(),
        window_days=settings.inactive_window_days,
    )
    if not customers:
        raise HTTPException(status_code=404, detail="No inactive customers")
    return customers


@router.get("/{customer_id}", response_model=CustomerDetail)
async def get_customer(customer_id: int, store: ServiceStore = Depends(get_store)) -> CustomerDetail:
    customer = customer_service.get_customer_detail(store, customer_id)
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer
