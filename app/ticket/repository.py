# app/ticket/repository.py
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session, joinedload

from app.ticket.models import Ticket


class TicketRepository:
    """Data access contract for tickets."""

    def get(self, ticket_id: int, include_users: bool = False) -> Ticket | None:
        raise NotImplementedError

    def page(self, offset: int, limit: int, include_users: bool = False) -> tuple[list[Ticket], int]:
        raise NotImplementedError

    def add(self, fields: dict[str, Any]) -> Ticket:
        raise NotImplementedError

    def save(self, ticket: Ticket) -> Ticket:
        raise NotImplementedError

    def delete(self, ticket_id: int) -> int:
        raise NotImplementedError

    def delete_many(self, ticket_ids: list[int]) -> int:
        raise NotImplementedError


class SQLTicketRepository(TicketRepository):
    """TicketRepository backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def _select(self, include_users: bool):
        stmt = select(Ticket)
        if include_users:
            stmt = stmt.options(joinedload(Ticket.creator), joinedload(Ticket.assignee))
        return stmt

    def get(self, ticket_id: int, include_users: bool = False) -> Ticket | None:
        stmt = self._select(include_users).where(Ticket.id == ticket_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def page(self, offset: int, limit: int, include_users: bool = False) -> tuple[list[Ticket], int]:
        total = self.db.execute(select(func.count(Ticket.id))).scalar_one()
        stmt = (
            self._select(include_users)
            .order_by(Ticket.created_at.desc(), Ticket.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all()), total

    def add(self, fields: dict[str, Any]) -> Ticket:
        db_ticket = Ticket(**fields)
        self.db.add(db_ticket)
        self.db.commit()
        self.db.refresh(db_ticket)
        return db_ticket

    def save(self, ticket: Ticket) -> Ticket:
        self.db.add(ticket)
        self.db.commit()
        self.db.refresh(ticket)
        return ticket

    def delete(self, ticket_id: int) -> int:
        result = self.db.execute(delete(Ticket).where(Ticket.id == ticket_id))
        self.db.commit()
        return result.rowcount

    def delete_many(self, ticket_ids: list[int]) -> int:
        stmt = delete(Ticket).where(Ticket.id.in_(ticket_ids)).execution_options(synchronize_session=False)
        try:
            result = self.db.execute(stmt)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return result.rowcount
