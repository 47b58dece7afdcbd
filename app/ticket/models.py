# app/ticket/models.py
import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.core.database import Base, utcnow
from app.user.models import User


class TicketStatus(str, enum.Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), index=True, nullable=False)
    description = Column(Text, nullable=False)
    status = Column(
        Enum(
            TicketStatus,
            name="ticket_status",
            values_callable=lambda statuses: [s.value for s in statuses],
            validate_strings=True,
        ),
        default=TicketStatus.OPEN,
        nullable=False,
        index=True,
    )
    creator_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    assignee_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    creator = relationship(User, foreign_keys=[creator_id], back_populates="created_tickets")
    assignee = relationship(User, foreign_keys=[assignee_id], back_populates="assigned_tickets")
