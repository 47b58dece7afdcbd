# app/core/dependencies.py
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.ticket.publisher import BulkDeletePublisher
from app.ticket.repository import SQLTicketRepository
from app.ticket.services import TicketService
from app.user.repository import SQLUserRepository
from app.user.services import UserService


def get_ticket_service(db: Session = Depends(get_db)) -> TicketService:
    return TicketService(SQLTicketRepository(db), SQLUserRepository(db))


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(SQLUserRepository(db))


def get_bulk_delete_publisher(request: Request) -> BulkDeletePublisher:
    return request.app.state.bulk_delete_publisher
