# ticket_tracker/auth/schemas.py
from typing import Any

from pydantic import BaseModel, ValidationError


class Credentials(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None

    model_config = {"extra": "ignore"}

    @classmethod
    def from_body(cls, body: Any) -> "Credentials":
        if not isinstance(body, dict):
            return cls()
        try:
            return cls.model_validate(body)
        except ValidationError:
            return cls()


class TokenOut(BaseModel):
    token: str


class UserOut(BaseModel):
    email: str
