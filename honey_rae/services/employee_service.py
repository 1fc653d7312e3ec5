from __future__ import annotations

from collections import Counter
from datetime import date, timedelta

from honey_rae.db.store import ServiceStore
from honey_rae.models.schemas import Customer, Employee, EmployeeDetail


def join_employee(store: ServiceStore, employee: Employee) -> EmployeeDetail:
    tickets = [t for t in store.list_tickets() if t.employee_id == employee.id]
    return EmployeeDetail(**employee.model_dump(), service_tickets=tickets)


def list_employees(store: ServiceStore) -> list[Employee]:
    return store.list_employees()


def get_employee_detail(store: ServiceStore, employee_id: int) -> EmployeeDetail | None:
    employee = store.get_employee(employee_id)
    return join_employee(store, employee) if employee else None


def available_employees(store: ServiceStore) -> list[Employee]:
    """Employees that hold no open ticket."""

    busy = {t.employee_id for t in store.list_tickets() if t.is_open and t.employee_id is not None}
    return [e for e in store.list_employees() if e.id not in busy]


def customers_served(store: ServiceStore, employee_id: int) -> list[Customer]:
    customer_ids = {t.customer_id for t in store.list_tickets() if t.employee_id == employee_id}
    return [c for c in store.list_customers() if c.id in customer_ids]


def previous_month_bounds(today: date) -> tuple[date, date]:
    last_day = today.replace(day=1) - timedelta(days=1)
    return last_day.replace(day=1), last_day


def employee_of_the_month(store: ServiceStore, today: date) -> EmployeeDetail | None:
    """Employee with the most tickets completed during the previous calendar month.

    Ties go to the lowest employee id. Returns ``None`` when nobody completed a ticket that month.
    """

    start, end = previous_month_bounds(today)
    counts = Counter(
        t.employee_id
        for t in store.list_tickets()
        if t.employee_id is not None and t.date_completed is not None and start <= t.date_completed <= end
    )

    candidates = [e for e in store.list_employees() if counts[e.id] > 0]
    if not candidates:
        return None

    best = min(candidates, key=lambda e: (-counts[e.id], e.id))
    return join_employee(store, best)
