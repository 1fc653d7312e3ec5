from datetime import date

from honey_rae.models.schemas import ServiceTicket


async def test_list_employees(api_client) -> None:
    resp = await api_client.get("/employees")
    assert resp.status_code == 200
    assert [e["name"] for e in resp.json()] == ["Steve Perry", "David Coverdale"]
    assert resp.json()[1]["speciality"] == "Screaming"


async def test_get_employee_embeds_tickets(api_client) -> None:
    resp = await api_client.get("/employees/200")
    assert resp.status_code == 200
    assert [t["id"] for t in resp.json()["serviceTickets"]] == [1, 4]


async def test_get_unknown_employee_returns_404(api_client) -> None:
    resp = await api_client.get("/employees/999")
    assert resp.status_code == 404


async def test_available_employees_exclude_open_ticket_holders(api_client) -> None:
    resp = await api_client.get("/employees/available")
    assert resp.status_code == 200
    assert resp.json() == []

    await api_client.post("/servicetickets/4/complete")
    resp = await api_client.get("/employees/available")
    assert [e["id"] for e in resp.json()] == [200]


async def test_employee_customers_are_distinct(api_client, store) -> None:
    store.load(tickets=[ServiceTicket(id=6, customer_id=101, employee_id=200, description="Another monitor")])
    resp = await api_client.get("/employees/200/customers")
    assert resp.status_code == 200
    assert [c["id"] for c in resp.json()] == [100, 101]


async def test_employee_customers_for_unknown_employee_is_empty(api_client) -> None:
    resp = await api_client.get("/employees/999/customers")
    assert resp.status_code == 200
    assert resp.json() == []


async def test_employee_of_the_month_uses_previous_calendar_month(api_client) -> None:
    resp = await api_client.get("/employees/employee-of-the-month")
    assert resp.status_code == 200
    employee = resp.json()
    assert employee["id"] == 200
    assert [t["id"] for t in employee["serviceTickets"]] == [1, 4]


async def test_employee_of_the_month_returns_404_without_completions(api_client, set_today) -> None:
    set_today(date(2025, 3, 1))
    resp = await api_client.get("/employees/employee-of-the-month")
    assert resp.status_code == 404


async def test_employee_of_the_month_rolls_back_across_year(api_client, store, set_today) -> None:
    set_today(date(2025, 12, 31))
    await api_client.post("/servicetickets/2/complete")
    await api_client.post("/servicetickets/4/complete")

    set_today(date(2026, 1, 5))
    resp = await api_client.get("/employees/employee-of-the-month")
    assert resp.status_code == 200
    # One completion each: the lower employee id wins the tie.
    assert resp.json()["id"] == 200

    store.load(tickets=[ServiceTicket(id=6, customer_id=100, employee_id=201, date_completed=date(2025, 12, 2))])
    resp = await api_client.get("/employees/employee-of-the-month")
    assert resp.json()["id"] == 201


async def test_employee_of_the_month_counts_most_completions(api_client, store) -> None:
    store.load(
        tickets=[
            ServiceTicket(id=6, customer_id=100, employee_id=201, date_completed=date(2025, 1, 3)),
            ServiceTicket(id=7, customer_id=101, employee_id=201, date_completed=date(2025, 1, 31)),
            # Outside January.
            ServiceTicket(id=8, customer_id=101, employee_id=200, date_completed=date(2025, 2, 1)),
            ServiceTicket(id=9, customer_id=101, employee_id=200, date_completed=date(2024, 12, 31)),
        ]
    )
    resp = await api_client.get("/employees/employee-of-the-month")
    assert resp.status_code == 200
    assert resp.json()["id"] == 201
