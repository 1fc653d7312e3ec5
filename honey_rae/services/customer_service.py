from __future__ import annotations

from datetime import date, timedelta

from honey_rae.db.store import ServiceStore
from honey_rae.models.schemas import Customer, CustomerDetail


def join_customer(store: ServiceStore, customer: Customer) -> CustomerDetail:
    tickets = [t for t in store.list_tickets() if t.customer_id == customer.id]
    return CustomerDetail(**customer.model_dump(), service_tickets=tickets)


def list_customers(store: ServiceStore) -> list[Customer]:
    return store.list_customers()


def get_customer_detail(store: ServiceStore, customer_id: int) -> CustomerDetail | None:
    customer = store.get_customer(customer_id)
    return join_customer(store, customer) if customer else None


def inactive_customers(store: ServiceStore, today: date, window_days: int = 365) -> list[Customer]:
    """Customers with no ticket completed on or after ``today - window_days``."""

    cutoff = today - timedelta(days=window_days)
    active = {t.customer_id for t in store.list_tickets() if t.date_completed is not None and t.date_completed >= cutoff}
    return [c for c in store.list_customers() if c.id not in active]
