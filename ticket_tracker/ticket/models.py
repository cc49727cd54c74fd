# ticket_tracker/ticket/models.py
import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone

DEFAULT_PRIORITY = "medium"


class TicketStatus(str, enum.Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    CLOSED = "closed"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Ticket:
    id: int
    title: str
    status: str
    description: str = ""
    priority: str = DEFAULT_PRIORITY
    created: datetime = field(default_factory=_utcnow)
