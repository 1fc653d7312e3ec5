from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from honey_rae.db.store import ServiceStore, get_store
from honey_rae.models.schemas import Customer, Employee, EmployeeDetail
from honey_rae.services import clock, employee_service

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[Employee])
async def get_employees(store: ServiceStore = Depends(get_store)) -> list[Employee]:
    return employee_service.list_employees(store)


@router.get("/available", response_model=list[Employee])
async def get_available_employees(store: ServiceStore = Depends(get_store)) -> list[Employee]:
    return employee_service.available_employees(store)


@router.get("/employee-of-the-month", response_model=EmployeeDetail)
async def get_employee_of_the_month(store: ServiceStore = Depends(get_store)) -> EmployeeDetail:
    employee = employee_service.employee_of_the_month(store, today=clock.today())
    if employee is None:
        raise HTTPException(status_code=404, detail="No tickets were completed last month")
    return employee


@router.get("/{employee_id}", response_model=EmployeeDetail)
async def get_employee(employee_id: int, store: ServiceStore = Depends(get_store)) -> EmployeeDetail:
    employee = employee_service.get_employee_detail(store, employee_id)
    if employee is None:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee


@router.get("/{employee_id}/customers", response_model=list[Customer])
async def get_employee_customers(employee_id: int, store: ServiceStore = Depends(get_store)) -> list[Customer]:
    return employee_service.customers_served(store, employee_id)
