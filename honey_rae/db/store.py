from __future__ import annotations

from collections.abc import Iterable
from threading import Lock

from honey_rae.models.schemas import Customer, Employee, ServiceTicket, ServiceTicketCreate


class ServiceStore:
    """Thread-safe, process-local store for customers, employees and tickets (resets on restart).

    Every read hands out copies so callers can never mutate stored entities in place.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._customers: dict[int, Customer] = {}
        self._employees: dict[int, Employee] = {}
        self._tickets: dict[int, ServiceTicket] = {}

    def load(
        self,
        customers: Iterable[Customer] = (),
        employees: Iterable[Employee] = (),
        tickets: Iterable[ServiceTicket] = (),
    ) -> None:
        with self._lock:
            for customer in customers:
                self._customers[customer.id] = customer.model_copy()
            for employee in employees:
                self._employees[employee.id] = employee.model_copy()
            for ticket in tickets:
                self._tickets[ticket.id] = ticket.model_copy()

    def clear(self) -> None:
        with self._lock:
            self._customers.clear()
            self._employees.clear()
            self._tickets.clear()

    def list_customers(self) -> list[Customer]:
        with self._lock:
            return [c.model_copy() for c in self._customers.values()]

    def get_customer(self, customer_id: int) -> Customer | None:
        with self._lock:
            customer = self._customers.get(customer_id)
            return customer.model_copy() if customer else None

    def list_employees(self) -> list[Employee]:
        with self._lock:
            return [e.model_copy() for e in self._employees.values()]

    def get_employee(self, employee_id: int) -> Employee | None:
        with self._lock:
            employee = self._employees.get(employee_id)
            return employee.model_copy() if employee else None

    def list_tickets(self) -> list[ServiceTicket]:
        with self._lock:
            return [t.model_copy() for t in self._tickets.values()]

    def get_ticket(self, ticket_id: int) -> ServiceTicket | None:
        with self._lock:
            ticket = self._tickets.get(ticket_id)
            return ticket.model_copy() if ticket else None

    def add_ticket(self, payload: ServiceTicketCreate) -> ServiceTicket:
        with self._lock:
            # An empty collection starts numbering at 1.
            next_id = max(self._tickets, default=0) + 1
            ticket = ServiceTicket(id=next_id, **payload.model_dump())
            self._tickets[next_id] = ticket
            return ticket.model_copy()

    def replace_ticket(self, ticket: ServiceTicket) -> ServiceTicket:
        with self._lock:
            if ticket.id not in self._tickets:
                raise ValueError("Service ticket not found")
            self._tickets[ticket.id] = ticket.model_copy()
            return ticket.model_copy()

    def delete_ticket(self, ticket_id: int) -> None:
        with self._lock:
            if self._tickets.pop(ticket_id, None) is None:
                raise ValueError("Service ticket not found")


_STORE: ServiceStore | None = None


def get_store() -> ServiceStore:
    global _STORE
    if _STORE is None:
        _STORE = ServiceStore()
    return _STORE


def reset_store(seed: bool = False) -> ServiceStore:
    """Empty the shared store, optionally reloading the demo data (used at startup and by tests)."""

    from honey_rae.db.seed import load_demo_data

    store = get_store()
    store.clear()
    if seed:
        load_demo_data(store)
    return store
