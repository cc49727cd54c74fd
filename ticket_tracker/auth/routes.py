# ticket_tracker/auth/routes.py
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ticket_tracker.auth.schemas import Credentials, TokenOut, UserOut
from ticket_tracker.auth.services import issue_demo_token
from ticket_tracker.core.session import SessionRegistry, get_current_user, get_registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


async def read_credentials(request: Request) -> Credentials:
    body: Any = None
    try:
        body = await request.json()
    except ValueError:
        pass
    return Credentials.from_body(body)


def _start_session(request: Request, sessions: SessionRegistry, email: str) -> TokenOut:
    old_sid = request.session.get("sid")
    if old_sid:
        sessions.discard(old_sid)
    request.session.clear()
    request.session["user"] = email
    request.session["sid"] = sessions.open()
    logger.info("Signed in %s", email)
    return TokenOut(token=issue_demo_token(email))


@router.post("/login", response_model=TokenOut, responses={400: {}})
def login(
    request: Request,
    creds: Credentials = Depends(read_credentials),
    sessions: SessionRegistry = Depends(get_registry),
):
    if not creds.email or not creds.password:
        return JSONResponse(status_code=400, content={"error": "Email and password are required"})
    return _start_session(request, sessions, creds.email)


@router.post("/signup", response_model=TokenOut, responses={400: {}})
def signup(
    request: Request,
    creds: Credentials = Depends(read_credentials),
    sessions: SessionRegistry = Depends(get_registry),
):
    if not creds.name or not creds.email or not creds.password:
        return JSONResponse(status_code=400, content={"error": "Name, email and password are required"})
    return _start_session(request, sessions, creds.email)


@router.post("/logout")
def logout(request: Request, sessions: SessionRegistry = Depends(get_registry)):
    sid = request.session.get("sid")
    if sid:
        sessions.discard(sid)
    request.session.clear()
    return {"success": True}


@router.get("/me", response_model=UserOut)
def me(user: str = Depends(get_current_user)):
    return UserOut(email=user)
