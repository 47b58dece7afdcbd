# app/core/celery_app.py
"""Celery application factory."""

from celery import Celery

from app.core.config import Settings


def create_celery_app(settings: Settings) -> Celery:
    celery_app = Celery("ticket_tracker", broker=settings.RABBITMQ_URL)

    celery_app.conf.update(
        task_serializer="json",
        accept_content=["json"],
        timezone="UTC",
        enable_utc=True,
        # fire-and-forget: nobody reads results back
        task_ignore_result=True,
        task_default_queue=settings.RABBITMQ_TICKETS_QUEUE_NAME,
        worker_hijack_root_logger=False,
        broker_connection_retry_on_startup=True,
    )
    return celery_app


__all__ = ("create_celery_app",)
