from __future__ import annotations

import logging

from honey_rae.db.store import ServiceStore
from honey_rae.models.schemas import ServiceTicket, ServiceTicketCreate, ServiceTicketDetail
from honey_rae.observability.metrics import get_metrics
from honey_rae.services import clock

logger = logging.getLogger(__name__)


def join_ticket(store: ServiceStore, ticket: ServiceTicket) -> ServiceTicketDetail:
    """Attach the referenced customer and employee; unknown references stay ``None``."""

    customer = store.get_customer(ticket.customer_id)
    employee = store.get_employee(ticket.employee_id) if ticket.employee_id is not None else None
    return ServiceTicketDetail(**ticket.model_dump(), customer=customer, employee=employee)


def list_tickets(store: ServiceStore) -> list[ServiceTicket]:
    return store.list_tickets()


def get_ticket_detail(store: ServiceStore, ticket_id: int) -> ServiceTicketDetail | None:
    ticket = store.get_ticket(ticket_id)
    return join_ticket(store, ticket) if ticket else None


def create_ticket(store: ServiceStore, payload: ServiceTicketCreate) -> ServiceTicket:
    ticket = store.add_ticket(payload)
    get_metrics().observe_ticket_event("created")
    logger.info("ticket.created", extra={"ticket_id": ticket.id, "customer_id": ticket.customer_id})
    return ticket


def replace_ticket(store: ServiceStore, ticket: ServiceTicket) -> ServiceTicket:
    replaced = store.replace_ticket(ticket)
    get_metrics().observe_ticket_event("replaced")
    logger.info("ticket.replaced", extra={"ticket_id": ticket.id, "employee_id": ticket.employee_id})
    return replaced


def delete_ticket(store: ServiceStore, ticket_id: int) -> None:
    store.delete_ticket(ticket_id)
    get_metrics().observe_ticket_event("deleted")
    logger.info("ticket.deleted", extra={"ticket_id": ticket_id})


def complete_ticket(store: ServiceStore, ticket_id: int) -> ServiceTicket:
    ticket = store.get_ticket(ticket_id)
    if ticket is None:
        raise ValueError("Service ticket not found")

    completed = store.replace_ticket(ticket.model_copy(update={"date_completed": clock.today()}))
    get_metrics().observe_ticket_event("completed")
    logger.info("ticket.completed", extra={"ticket_id": ticket_id, "date_completed": completed.date_completed.isoformat()})
    return completed


def completed_tickets(store: ServiceStore) -> list[ServiceTicket]:
    done = [t for t in store.list_tickets() if t.date_completed is not None]
    return sorted(done, key=lambda t: t.date_completed)


def emergency_tickets(store: ServiceStore) -> list[ServiceTicket]:
    return [t for t in store.list_tickets() if t.emergency and t.is_open]


def unassigned_tickets(store: ServiceStore) -> list[ServiceTicket]:
    return [t for t in store.list_tickets() if t.employee_id is None]


def _priority_key(ticket: ServiceTicket) -> tuple[bool, bool, int]:
    # Emergencies first; within a group unassigned tickets precede any employee id.
    return (not ticket.emergency, ticket.employee_id is not None, ticket.employee_id or 0)


def prioritized_tickets(store: ServiceStore) -> list[ServiceTicket]:
    open_tickets = [t for t in store.list_tickets() if t.is_open]
    return sorted(open_tickets, key=_priority_key)
