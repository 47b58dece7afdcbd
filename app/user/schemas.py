# app/user/schemas.py
from datetime import datetime

from pydantic import EmailStr, Field

from app.core.schemas import CamelModel
from app.ticket.schemas import TicketSummary


class UserBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., max_length=255)
    age: int | None = Field(default=None, ge=0, le=150)


class UserCreate(UserBase):
    pass


class UserUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = Field(default=None, max_length=255)
    age: int | None = Field(default=None, ge=0, le=150)


class UserOut(UserBase):
    id: int
    created_at: datetime
    updated_at: datetime


class UserWithTickets(UserOut):
    created_tickets: list[TicketSummary] = []
    assigned_tickets: list[TicketSummary] = []
