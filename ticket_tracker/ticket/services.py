# ticket_tracker/ticket/services.py
import logging
from dataclasses import dataclass
from typing import Mapping

from ticket_tracker.ticket.models import DEFAULT_PRIORITY, Ticket, TicketStatus
from ticket_tracker.ticket.store import TicketStore

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ("title", "description", "status", "priority")


@dataclass
class DashboardSummary:
    total: int
    open: int
    in_progress: int
    closed: int
    recent: list[Ticket]


def validate_ticket(data: Mapping[str, str]) -> dict[str, str]:
    """Return a field -> message mapping, empty when ``data`` is acceptable."""
    errors: dict[str, str] = {}
    if not (data.get("title") or "").strip():
        errors["title"] = "Title is required"
    status = data.get("status")
    if not status:
        errors["status"] = "Status is required"
    elif status not in TicketStatus.values():
        errors["status"] = "Invalid status value"
    return errors


def list_tickets(
    store: TicketStore, status: str | None = None, search: str | None = None
) -> list[Ticket]:
    items = store.snapshot()
    if status:
        items = [t for t in items if t.status == status]
    if search:
        needle = search.casefold()
        items = [
            t
            for t in items
            if needle in t.title.casefold() or needle in t.description.casefold()
        ]
    return items


def get_ticket(store: TicketStore, ticket_id: int) -> Ticket | None:
    return store.find(ticket_id)


def create_ticket(store: TicketStore, data: Mapping[str, str]) -> Ticket | dict[str, str]:
    """Validate ``data`` and append a new ticket.

    Returns the created ticket, or the validation errors when nothing was
    stored.
    """
    errors = validate_ticket(data)
    if errors:
        logger.debug("Rejected ticket create: %s", errors)
        return errors
    with store.lock:
        ticket = Ticket(
            id=store.next_id(),
            title=data["title"].strip(),
            status=data["status"],
            description=data.get("description", ""),
            priority=data.get("priority", DEFAULT_PRIORITY),
        )
        store.append(ticket)
    logger.info("Created ticket %s", ticket.id)
    return ticket


def update_ticket(
    store: TicketStore, ticket_id: int, data: Mapping[str, str]
) -> Ticket | dict[str, str] | None:
    """Apply the supplied fields of ``data`` to an existing ticket.

    Fields absent from ``data`` keep their stored value, and validation runs
    against the merged result. Returns the updated ticket, the validation
    errors (ticket untouched), or None when no ticket has ``ticket_id``.
    """
    with store.lock:
        ticket = store.find(ticket_id)
        if ticket is None:
            return None
        merged = {name: getattr(ticket, name) for name in MUTABLE_FIELDS}
        merged.update({k: v for k, v in data.items() if k in MUTABLE_FIELDS})
        errors = validate_ticket(merged)
        if errors:
            logger.debug("Rejected update of ticket %s: %s", ticket_id, errors)
            return errors
        for name in MUTABLE_FIELDS:
            if name in data:
                setattr(ticket, name, data[name])
        ticket.title = ticket.title.strip()
    logger.info("Updated ticket %s", ticket_id)
    return ticket


def delete_ticket(store: TicketStore, ticket_id: int) -> Ticket | None:
    deleted = store.remove(ticket_id)
    if deleted is not None:
        logger.info("Deleted ticket %s", ticket_id)
    return deleted


def dashboard_summary(store: TicketStore, recent_limit: int = 5) -> DashboardSummary:
    items = store.snapshot()
    counts = {status.value: 0 for status in TicketStatus}
    for ticket in items:
        counts[ticket.status] += 1
    # sorted() is stable, so reversing first puts later inserts ahead on ties
    recent = sorted(reversed(items), key=lambda t: t.created, reverse=True)
    return DashboardSummary(
        total=len(items),
        open=counts[TicketStatus.OPEN.value],
        in_progress=counts[TicketStatus.IN_PROGRESS.value],
        closed=counts[TicketStatus.CLOSED.value],
        recent=recent[:recent_limit],
    )
