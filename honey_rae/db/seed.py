from __future__ import annotations

from datetime import date

from honey_rae.db.store import ServiceStore
from honey_rae.models.schemas import Customer, Employee, ServiceTicket

DEMO_CUSTOMERS = [
    Customer(id=100, name="Bob Marley", address="345 Maple Street"),
    Customer(id=101, name="Sean Connery", address="678 Ocean Drive"),
    Customer(id=102, name="Genghis Khan", address="1234 Elmwood Avenue"),
]

DEMO_EMPLOYEES = [
    Employee(id=200, name="Steve Perry", specialty="Singing"),
    Employee(id=201, name="David Coverdale", specialty="Screaming"),
]

DEMO_TICKETS = [
    ServiceTicket(
        id=1,
        customer_id=100,
        employee_id=200,
        description="Plugged-up toilet",
        emergency=False,
        date_completed=date(2025, 1, 28),
    ),
    ServiceTicket(id=2, customer_id=101, employee_id=201, description="Exposed wires", emergency=True),
    ServiceTicket(id=3, customer_id=102, description="Busted mailbox", emergency=False),
    ServiceTicket(id=4, customer_id=101, employee_id=200, description="Non-functioning monitor", emergency=False),
    ServiceTicket(id=5, customer_id=100, description="Leaky faucet", emergency=True),
]


def load_demo_data(store: ServiceStore) -> None:
    store.load(customers=DEMO_CUSTOMERS, employees=DEMO_EMPLOYEES, tickets=DEMO_TICKETS)
