# app/ticket/publisher.py
from celery import Celery
from loguru import logger

BULK_DELETE_TASK = "tickets.bulk_delete"


class BulkDeletePublisher:
    """Hands a list of ticket ids to whatever will delete them later."""

    def publish(self, ids: list[int]) -> None:
        raise NotImplementedError


class CeleryBulkDeletePublisher(BulkDeletePublisher):
    """Sends the ids as a ``tickets.bulk_delete`` task message on the tickets queue."""

    def __init__(self, celery_app: Celery, queue_name: str):
        self.celery_app = celery_app
        self.queue_name = queue_name

    def publish(self, ids: list[int]) -> None:
        self.celery_app.send_task(BULK_DELETE_TASK, args=[list(ids)], queue=self.queue_name)
        logger.info(f"Bulk delete request for IDs: {', '.join(map(str, ids))} sent to {self.queue_name}.")
