import logging
from datetime import date

from honey_rae.db.store import ServiceStore
from honey_rae.models.schemas import Customer, Employee, ServiceTicket, ServiceTicketCreate
from honey_rae.services import customer_service, employee_service, ticket_service
from honey_rae.services.employee_service import previous_month_bounds


def _store(*tickets: ServiceTicket) -> ServiceStore:
    store = ServiceStore()
    store.load(
        customers=[Customer(id=1, name="A", address="a"), Customer(id=2, name="B", address="b")],
        employees=[Employee(id=10, name="X", specialty="x"), Employee(id=11, name="Y", specialty="y")],
        tickets=tickets,
    )
    return store


def test_previous_month_bounds() -> None:
    assert previous_month_bounds(date(2025, 3, 31)) == (date(2025, 2, 1), date(2025, 2, 28))
    assert previous_month_bounds(date(2024, 3, 1)) == (date(2024, 2, 1), date(2024, 2, 29))
    assert previous_month_bounds(date(2026, 1, 15)) == (date(2025, 12, 1), date(2025, 12, 31))


def test_prioritized_sorts_null_employee_first_within_group() -> None:
    store = _store(
        ServiceTicket(id=1, customer_id=1, employee_id=11),
        ServiceTicket(id=2, customer_id=1, employee_id=10, emergency=True),
        ServiceTicket(id=3, customer_id=2),
        ServiceTicket(id=4, customer_id=2, employee_id=10),
        ServiceTicket(id=5, customer_id=2, emergency=True, date_completed=date(2025, 1, 1)),
    )
    assert [t.id for t in ticket_service.prioritized_tickets(store)] == [2, 3, 4, 1]


def test_completed_tickets_sorted_by_date_with_stable_ties() -> None:
    store = _store(
        ServiceTicket(id=1, customer_id=1, date_completed=date(2025, 3, 1)),
        ServiceTicket(id=2, customer_id=1, date_completed=date(2025, 1, 1)),
        ServiceTicket(id=3, customer_id=1),
        ServiceTicket(id=4, customer_id=2, date_completed=date(2025, 1, 1)),
    )
    assert [t.id for t in ticket_service.completed_tickets(store)] == [2, 4, 1]


def test_join_ticket_does_not_modify_stored_ticket() -> None:
    store = _store(ServiceTicket(id=1, customer_id=1, employee_id=10))
    detail = ticket_service.get_ticket_detail(store, 1)

    assert detail.customer.name == "A"
    assert detail.employee.name == "X"
    assert "customer" not in store.get_ticket(1).model_dump()


def test_employee_of_the_month_ignores_unknown_employees() -> None:
    store = _store(ServiceTicket(id=1, customer_id=1, employee_id=99, date_completed=date(2025, 1, 10)))
    assert employee_service.employee_of_the_month(store, today=date(2025, 2, 1)) is None


def test_inactive_customers_include_customers_without_tickets() -> None:
    store = _store(ServiceTicket(id=1, customer_id=1, date_completed=date(2025, 1, 10)))
    inactive = customer_service.inactive_customers(store, today=date(2025, 2, 1), window_days=365)
    assert [c.id for c in inactive] == [2]


def test_ticket_mutations_emit_log_events(caplog) -> None:
    store = _store()
    with caplog.at_level(logging.INFO, logger="honey_rae.services.ticket_service"):
        ticket = ticket_service.create_ticket(store, ServiceTicketCreate(customer_id=1, description="Fence"))
        ticket_service.complete_ticket(store, ticket.id)

    events = [record.getMessage() for record in caplog.records]
    assert events == ["ticket.created", "ticket.completed"]
    assert caplog.records[0].ticket_id == ticket.id
