# ticket_tracker/auth/services.py
import base64
import json
import time


def issue_demo_token(email: str, issued_at: int | None = None) -> str:
    """Build an unsigned bearer-style token naming ``email``.

    Nothing verifies it; it only gives browser clients something to hold.
    """
    claims = {"sub": email, "iat": int(time.time()) if issued_at is None else issued_at}
    raw = json.dumps(claims, separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii")
