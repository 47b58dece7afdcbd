# app/ticket/tasks.py
"""Queue consumer for bulk ticket deletion."""

from celery import Celery
from loguru import logger
from sqlalchemy.orm import sessionmaker

from app.ticket.publisher import BULK_DELETE_TASK
from app.ticket.repository import SQLTicketRepository
from app.ticket.services import TicketService
from app.user.repository import SQLUserRepository

__all__ = ["register_bulk_delete_consumer"]


def register_bulk_delete_consumer(celery_app: Celery, session_factory: sessionmaker):
    """Register the ``tickets.bulk_delete`` task on ``celery_app``.

    Args:
        celery_app: Celery application the worker runs
        session_factory: Factory for the sessions each message is handled in

    Returns:
        The registered task
    """

    @celery_app.task(name=BULK_DELETE_TASK, ignore_result=True)
    def bulk_delete_tickets(ids: list[int]) -> int:
        logger.info(f"Received deletion request for IDs: {', '.join(map(str, ids or []))}")
        with session_factory() as db:
            service = TicketService(SQLTicketRepository(db), SQLUserRepository(db))
            return service.bulk_delete(ids or [])

    return bulk_delete_tickets
