from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Customer(CamelModel):
    id: int
    name: str
    address: str


class Employee(CamelModel):
    id: int
    name: str
    # The wire name keeps the original service's spelling.
    specialty: str = Field(alias="speciality")


class ServiceTicket(CamelModel):
    id: int
    customer_id: int
    employee_id: int | None = None
    description: str = ""
    emergency: bool = False
    date_completed: date | None = None

    @property
    def is_open(self) -> bool:
        return self.date_completed is None


class ServiceTicketCreate(CamelModel):
    """Body of POST /servicetickets. Tickets are created open, so ``id`` and ``dateCompleted`` in the body are ignored."""

    customer_id: int
    employee_id: int | None = None
    description: str = ""
    emergency: bool = False


class ServiceTicketReplace(CamelModel):
    """Body of PUT /servicetickets/{id}. A missing ``id`` never matches the path."""

    id: int | None = None
    customer_id: int
    employee_id: int | None = None
    description: str = ""
    emergency: bool = False
    date_completed: date | None = None


class ServiceTicketDetail(ServiceTicket):
    customer: Customer | None = None
    employee: Employee | None = None


class CustomerDetail(Customer):
    service_tickets: list[ServiceTicket] = Field(default_factory=list)


class EmployeeDetail(Employee):
    service_tickets: list[ServiceTicket] = Field(default_factory=list)
