# tests/test_bulk_delete.py
from unittest.mock import MagicMock

from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from app.core.celery_app import create_celery_app
from app.ticket.models import Ticket
from app.ticket.publisher import BULK_DELETE_TASK, CeleryBulkDeletePublisher
from app.ticket.repository import SQLTicketRepository, TicketRepository
from app.ticket.services import TicketService
from app.ticket.tasks import register_bulk_delete_consumer
from app.user.repository import SQLUserRepository, UserRepository


class BrokenTicketRepository(TicketRepository):
    def __init__(self):
        self.calls = []

    def delete_many(self, ticket_ids):
        self.calls.append(list(ticket_ids))
        raise OperationalError("DELETE FROM tickets", {}, Exception("database is gone"))


class OverflowingTicketRepository(TicketRepository):
    def delete_many(self, ticket_ids):
        raise OverflowError("Python int too large to convert to SQLite INTEGER")


def remaining_ids(session):
    session.expire_all()
    return set(session.execute(select(Ticket.id)).scalars().all())


def test_bulk_delete_endpoint_accepts_and_queues(client, publisher):
    r = client.post("/tickets/bulk-delete", json={"ids": [2, 3, 4]})
    assert r.status_code == 202
    assert r.json() == {
        "message": "Bulk delete request accepted and queued for processing.",
        "ids": [2, 3, 4],
    }
    assert publisher.published == [[2, 3, 4]]


def test_bulk_delete_endpoint_does_not_delete_synchronously(client, publisher, make_ticket):
    ticket = make_ticket()
    client.post("/tickets/bulk-delete", json={"ids": [ticket["id"]]})
    assert client.get(f"/tickets/{ticket['id']}").status_code == 200


def test_bulk_delete_endpoint_rejects_empty_list(client, publisher):
    r = client.post("/tickets/bulk-delete", json={"ids": []})
    assert r.status_code == 400
    assert publisher.published == []


def test_bulk_delete_endpoint_rejects_non_numeric_ids(client, publisher):
    assert client.post("/tickets/bulk-delete", json={"ids": ["a", 2]}).status_code == 400
    assert client.post("/tickets/bulk-delete", json={"ids": [1.5]}).status_code == 400
    assert client.post("/tickets/bulk-delete", json={}).status_code == 400
    assert publisher.published == []


def test_bulk_delete_endpoint_rejects_ids_out_of_range(client, publisher):
    assert client.post("/tickets/bulk-delete", json={"ids": [10**20]}).status_code == 400
    assert client.post("/tickets/bulk-delete", json={"ids": [2**63]}).status_code == 400
    assert client.post("/tickets/bulk-delete", json={"ids": [0, 2]}).status_code == 400
    assert publisher.published == []

    assert client.post("/tickets/bulk-delete", json={"ids": [2**63 - 1]}).status_code == 202
    assert publisher.published == [[2**63 - 1]]


def test_bulk_delete_ignores_missing_ids(db_session, seed_tickets):
    first, second, third, fourth = seed_tickets(4)
    tickets = SQLTicketRepository(db_session)
    tickets.delete(third)
    service = TicketService(tickets, SQLUserRepository(db_session))

    affected = service.bulk_delete([second, third, fourth])

    assert affected == 2
    assert remaining_ids(db_session) == {first}


def test_bulk_delete_empty_list_is_noop(log_messages):
    tickets = BrokenTicketRepository()
    service = TicketService(tickets, UserRepository())

    assert service.bulk_delete([]) == 0
    assert tickets.calls == []
    assert "Received bulk delete request with no IDs. Skipping." in log_messages


def test_bulk_delete_logs_and_swallows_persistence_errors(log_messages):
    tickets = BrokenTicketRepository()
    service = TicketService(tickets, UserRepository())

    assert service.bulk_delete([1, 2]) == 0
    assert tickets.calls == [[1, 2]]
    assert "Error during bulk deletion for IDs: 1, 2" in log_messages


def test_bulk_delete_logs_and_swallows_overflow(log_messages):
    service = TicketService(OverflowingTicketRepository(), UserRepository())

    assert service.bulk_delete([10**20]) == 0
    assert f"Error during bulk deletion for IDs: {10**20}" in log_messages


def test_celery_publisher_sends_task_to_queue():
    celery_app = MagicMock()
    publisher = CeleryBulkDeletePublisher(celery_app, "tickets_queue")

    publisher.publish([5, 6])

    celery_app.send_task.assert_called_once_with(BULK_DELETE_TASK, args=[[5, 6]], queue="tickets_queue")


def test_celery_app_routes_to_configured_queue(settings):
    celery_app = create_celery_app(settings)
    assert celery_app.conf.task_default_queue == settings.RABBITMQ_TICKETS_QUEUE_NAME
    assert celery_app.conf.task_serializer == "json"


def test_consumer_deletes_tickets(settings, database, db_session, seed_tickets, log_messages):
    ids = seed_tickets(3)
    db_session.commit()

    celery_app = create_celery_app(settings)
    celery_app.conf.task_always_eager = True
    task = register_bulk_delete_consumer(celery_app, database.session_factory)
    assert task.name == BULK_DELETE_TASK

    result = task.delay(ids[:2] + [99999])
    assert result.get() == 2
    assert remaining_ids(db_session) == {ids[2]}
    assert any(m.startswith("Received deletion request for IDs") for m in log_messages)

    # redelivery of the same message is harmless
    assert task.delay(ids[:2]).get() == 0
    assert remaining_ids(db_session) == {ids[2]}
