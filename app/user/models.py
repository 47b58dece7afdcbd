# app/user/models.py
from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from app.core.database import Base, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    age = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # the foreign keys decide what happens to tickets, not the ORM
    created_tickets = relationship(
        "Ticket",
        foreign_keys="Ticket.creator_id",
        back_populates="creator",
        passive_deletes="all",
        order_by="Ticket.id",
    )
    assigned_tickets = relationship(
        "Ticket",
        foreign_keys="Ticket.assignee_id",
        back_populates="assignee",
        passive_deletes="all",
        order_by="Ticket.id",
    )
