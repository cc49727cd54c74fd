# ticket_tracker/ticket/routes.py
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from fastapi.responses import JSONResponse

from ticket_tracker.core.config import Settings, get_settings
from ticket_tracker.core.session import get_ticket_store
from ticket_tracker.ticket import services as ticket_service
from ticket_tracker.ticket.schemas import (
    DashboardOut,
    TicketInput,
    TicketOut,
    ValidationErrorOut,
)
from ticket_tracker.ticket.store import TicketStore

router = APIRouter(prefix="/api", tags=["Tickets"])

NOT_FOUND = "Ticket not found"


async def read_ticket_input(request: Request) -> TicketInput:
    body: Any = None
    try:
        body = await request.json()
    except ValueError:
        pass
    return TicketInput.from_body(body)


def _invalid(errors: dict[str, str]) -> JSONResponse:
    return JSONResponse(status_code=400, content={"errors": errors})


@router.get("/tickets", response_model=list[TicketOut])
def list_all(
    status: str | None = Query(default=None, description="Filter by status: open, in_progress or closed"),
    search: str | None = Query(default=None, description="Case-insensitive match on title or description"),
    store: TicketStore = Depends(get_ticket_store),
):
    return ticket_service.list_tickets(store, status=status, search=search)


@router.post(
    "/tickets",
    response_model=TicketOut,
    status_code=201,
    responses={400: {"model": ValidationErrorOut}},
)
def create(
    payload: TicketInput = Depends(read_ticket_input),
    store: TicketStore = Depends(get_ticket_store),
):
    result = ticket_service.create_ticket(store, payload.as_fields())
    if isinstance(result, dict):
        return _invalid(result)
    return result


@router.get("/tickets/{ticket_id}", response_model=TicketOut)
def get(ticket_id: str, store: TicketStore = Depends(get_ticket_store)):
    ticket = ticket_service.get_ticket(store, _parse_id(ticket_id))
    if not ticket:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return ticket


@router.put(
    "/tickets/{ticket_id}",
    response_model=TicketOut,
    responses={400: {"model": ValidationErrorOut}},
)
def update(
    ticket_id: str,
    payload: TicketInput = Depends(read_ticket_input),
    store: TicketStore = Depends(get_ticket_store),
):
    tid = _parse_id(ticket_id)
    if payload.malformed:
        if ticket_service.get_ticket(store, tid) is None:
            raise HTTPException(status_code=404, detail=NOT_FOUND)
        return _invalid(ticket_service.validate_ticket({}))
    result = ticket_service.update_ticket(store, tid, payload.as_fields())
    if result is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    if isinstance(result, dict):
        return _invalid(result)
    return result


@router.delete("/tickets/{ticket_id}", status_code=204)
def delete(ticket_id: str, store: TicketStore = Depends(get_ticket_store)):
    deleted = ticket_service.delete_ticket(store, _parse_id(ticket_id))
    if not deleted:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return Response(status_code=204)


@router.get("/dashboard", response_model=DashboardOut)
def dashboard(
    store: TicketStore = Depends(get_ticket_store),
    settings: Settings = Depends(get_settings),
):
    return ticket_service.dashboard_summary(store, recent_limit=settings.DASHBOARD_RECENT_LIMIT)


def _parse_id(raw: str) -> int:
    # A segment that is not an integer cannot name any ticket
    try:
        return int(raw)
    except ValueError:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
