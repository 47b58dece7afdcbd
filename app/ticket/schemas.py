# app/ticket/schemas.py
from datetime import datetime
from typing import Annotated

from pydantic import Field, StrictInt

from app.core.schemas import MAX_DB_ID, CamelModel, DbId
from app.ticket.models import TicketStatus


class TicketBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)


class TicketCreate(TicketBase):
    creator_id: DbId
    assignee_id: DbId | None = None


class TicketStatusUpdate(CamelModel):
    status: TicketStatus


class TicketUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    status: TicketStatus | None = None
    assignee_id: DbId | None = None


class BulkDeleteRequest(CamelModel):
    ids: list[Annotated[StrictInt, Field(ge=1, le=MAX_DB_ID)]] = Field(..., min_length=1)


class BulkDeleteAccepted(CamelModel):
    message: str
    ids: list[int]


class UserRef(CamelModel):
    id: int
    name: str
    email: str


class TicketSummary(TicketBase):
    id: int
    status: TicketStatus
    creator_id: int
    assignee_id: int | None = None
    created_at: datetime
    updated_at: datetime


class TicketOut(TicketSummary):
    creator: UserRef | None = None
    assignee: UserRef | None = None
