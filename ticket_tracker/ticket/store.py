# ticket_tracker/ticket/store.py
import threading

from ticket_tracker.ticket.models import Ticket


class TicketStore:
    """Ordered tickets of one session.

    Insertion order is creation order. Callers doing read-modify-write work
    hold ``lock`` for the whole operation; it is reentrant so the helpers
    below can be called while it is held.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._tickets: list[Ticket] = []
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._tickets)

    def next_id(self) -> int:
        with self.lock:
            highest = max((t.id for t in self._tickets), default=0)
            return max(highest, self._last_id) + 1

    def append(self, ticket: Ticket) -> Ticket:
        with self.lock:
            self._tickets.append(ticket)
            self._last_id = max(self._last_id, ticket.id)
            return ticket

    def find(self, ticket_id: int) -> Ticket | None:
        with self.lock:
            for ticket in self._tickets:
                if ticket.id == ticket_id:
                    return ticket
            return None

    def remove(self, ticket_id: int) -> Ticket | None:
        with self.lock:
            for index, ticket in enumerate(self._tickets):
                if ticket.id == ticket_id:
                    return self._tickets.pop(index)
            return None

    def snapshot(self) -> list[Ticket]:
        with self.lock:
            return list(self._tickets)
