# app/worker.py
"""Bulk-delete consumer process.

    celery -A app.worker:celery_app worker -Q tickets_queue --loglevel INFO
"""

from loguru import logger

from app.core.celery_app import create_celery_app
from app.core.config import get_settings
from app.core.database import Database
from app.core.logging import configure_logging
from app.ticket.tasks import register_bulk_delete_consumer

settings = get_settings()
configure_logging(settings)

database = Database(settings.DATABASE_URL)
celery_app = create_celery_app(settings)
bulk_delete_tickets = register_bulk_delete_consumer(celery_app, database.session_factory)

logger.info(f"Bulk delete consumer listening on queue: {settings.RABBITMQ_TICKETS_QUEUE_NAME}")

__all__ = ("celery_app",)
