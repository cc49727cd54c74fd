# tests/test_session.py
from ticket_tracker.core.session import SessionRegistry


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_open_and_get_return_same_store():
    sessions = SessionRegistry(ttl_seconds=60)
    sid = sessions.open()
    assert sessions.get(sid) is sessions.get(sid)


def test_get_unknown_sid_starts_empty_store():
    sessions = SessionRegistry(ttl_seconds=60)
    store = sessions.get("missing")
    assert len(store) == 0
    assert "missing" in sessions


def test_discard_removes_store():
    sessions = SessionRegistry(ttl_seconds=60)
    sid = sessions.open()
    sessions.discard(sid)
    assert sid not in sessions


def test_idle_sessions_expire():
    clock = FakeClock()
    sessions = SessionRegistry(ttl_seconds=10, clock=clock)
    idle = sessions.open()
    active = sessions.open()

    clock.now = 8
    sessions.get(active)
    clock.now = 15
    sessions.get(active)

    assert idle not in sessions
    assert active in sessions
