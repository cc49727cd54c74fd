# ticket_tracker/ticket/schemas.py
from datetime import datetime
from typing import Any

from pydantic import BaseModel, PrivateAttr, ValidationError


class TicketInput(BaseModel):
    """Raw ticket fields as submitted; unset fields stay unset.

    A body that is not a usable JSON object becomes an empty input flagged
    as ``malformed``.
    """

    title: str | None = None
    description: str | None = None
    status: str | None = None
    priority: str | None = None

    model_config = {"extra": "ignore", "coerce_numbers_to_str": True}

    _malformed: bool = PrivateAttr(default=False)

    @classmethod
    def from_body(cls, body: Any) -> "TicketInput":
        if isinstance(body, dict):
            try:
                return cls.model_validate(body)
            except ValidationError:
                pass
        empty = cls()
        empty._malformed = True
        return empty

    @property
    def malformed(self) -> bool:
        return self._malformed

    def as_fields(self) -> dict[str, str]:
        return self.model_dump(exclude_none=True)


class TicketOut(BaseModel):
    id: int
    title: str
    description: str
    status: str
    priority: str
    created: datetime

    model_config = {"from_attributes": True}


class DashboardOut(BaseModel):
    total: int
    open: int
    in_progress: int
    closed: int
    recent: list[TicketOut]


class ValidationErrorOut(BaseModel):
    errors: dict[str, str]
