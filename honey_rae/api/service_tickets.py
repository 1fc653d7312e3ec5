from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from honey_rae.db.store import ServiceStore, get_store
from honey_rae.models.schemas import ServiceTicket, ServiceTicketCreate, ServiceTicketDetail, ServiceTicketReplace
from honey_rae.services import ticket_service

router = APIRouter(prefix="/servicetickets", tags=["servicetickets"])


@router.get("", response_model=list[ServiceTicket])
async def get_service_tickets(store: ServiceStore = Depends(get_store)) -> list[ServiceTicket]:
    return ticket_service.list_tickets(store)


# Fixed paths are registered ahead of /{ticket_id} so they are not read as ids.
@router.get("/completed", response_model=list[ServiceTicket])
async def get_completed_tickets(store: ServiceStore = Depends(get_store)) -> list[ServiceTicket]:
    tickets = ticket_service.completed_tickets(store)
    if not tickets:
        raise HTTPException(status_code=404, detail="No completed service tickets")
    return tickets


@router.get("/emergencies", response_model=list[ServiceTicket])
async def get_emergency_tickets(store: ServiceStore = Depends(get_store)) -> list[ServiceTicket]:
    tickets = ticket_service.emergency_tickets(store)
    if not tickets:
        raise HTTPException(status_code=404, detail="No open emergency service tickets")
    return tickets


@router.get("/unassigned", response_model=list[ServiceTicket])
async def get_unassigned_tickets(store: ServiceStore = Depends(get_store)) -> list[ServiceTicket]:
    tickets = ticket_service.unassigned_tickets(store)
    if not tickets:
        raise HTTPException(status_code=404, detail="No unassigned service tickets")
    return tickets


@router.get("/prioritized", response_model=list[ServiceTicket])
async def get_prioritized_tickets(store: ServiceStore = Depends(get_store)) -> list[ServiceTicket]:
    tickets = ticket_service.prioritized_tickets(store)
    if not tickets:
        raise HTTPException(status_code=404, detail="No open service tickets")
    return tickets


@router.get("/{ticket_id}", response_model=ServiceTicketDetail)
async def get_service_ticket(ticket_id: int, store: ServiceStore = Depends(get_store)) -> ServiceTicketDetail:
    ticket = ticket_service.get_ticket_detail(store, ticket_id)
    if ticket is None:
        raise HTTPException(status_code=404, detail="Service ticket not found")
    return ticket


@router.post("", response_model=ServiceTicket)
async def create_service_ticket(
    payload: ServiceTicketCreate,
    store: ServiceStore = Depends(get_store),
) -> ServiceTicket:
    return ticket_service.create_ticket(store, payload)


@router.put("/{ticket_id}")
async def update_service_ticket(
    ticket_id: int,
    payload: ServiceTicketReplace,
    store: ServiceStore = Depends(get_store),
) -> Response:
    if payload.id != ticket_id:
        raise HTTPException(status_code=400, detail="Ticket id in body does not match path")
    try:
        ticket_service.replace_ticket(store, ServiceTicket(**payload.model_dump()))
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=200)


@router.delete("/{ticket_id}")
async def delete_service_ticket(ticket_id: int, store: ServiceStore = Depends(get_store)) -> Response:
    try:
        ticket_service.delete_ticket(store, ticket_id)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=200)


@router.post("/{ticket_id}/complete")
async def complete_service_ticket(ticket_id: int, store: ServiceStore = Depends(get_store)) -> Response:
    try:
        ticket_service.complete_ticket(store, ticket_id)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=200)
