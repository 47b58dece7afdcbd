# tests/conftest.py
import itertools

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from app.core.config import Settings
from app.core.database import Database
from app.main import create_app
from app.ticket.models import TicketStatus
from app.ticket.publisher import BulkDeletePublisher
from app.ticket.repository import SQLTicketRepository
from app.user.repository import SQLUserRepository

_emails = itertools.count(1)


class RecordingPublisher(BulkDeletePublisher):
    """In-memory stand-in for the broker: remembers what was published."""

    def __init__(self):
        self.published = []

    def publish(self, ids):
        self.published.append(list(ids))


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        APP_ENV="test",
        RABBITMQ_URL="memory://",
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def database(settings):
    db = Database(settings.DATABASE_URL)
    yield db
    db.dispose()


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
def app(settings, database, publisher):
    return create_app(settings, database=database, bulk_delete_publisher=publisher)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_session(database):
    database.create_all()
    session = database.session_factory()
    yield session
    session.close()


@pytest.fixture
def make_user(client):
    def _make_user(name="Ada", **fields):
        payload = {"name": name, "email": f"user{next(_emails)}@example.com", **fields}
        r = client.post("/users", json=payload)
        assert r.status_code == 201, r.text
        return r.json()

    return _make_user


@pytest.fixture
def make_ticket(client, make_user):
    def _make_ticket(title="T1", description="D1", creator_id=None, assignee_id=None):
        if creator_id is None:
            creator_id = make_user()["id"]
        payload = {"title": title, "description": description, "creatorId": creator_id}
        if assignee_id is not None:
            payload["assigneeId"] = assignee_id
        r = client.post("/tickets", json=payload)
        assert r.status_code == 201, r.text
        return r.json()

    return _make_ticket


@pytest.fixture
def seed_tickets(db_session):
    """Insert ``count`` tickets straight through the repositories, return their ids."""

    def _seed(count):
        user = SQLUserRepository(db_session).add({"name": "Seeder", "email": f"seed{next(_emails)}@example.com"})
        tickets = SQLTicketRepository(db_session)
        return [
            tickets.add(
                {
                    "title": f"Ticket {n}",
                    "description": "seeded",
                    "creator_id": user.id,
                    "status": TicketStatus.OPEN,
                }
            ).id
            for n in range(count)
        ]

    return _seed


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
