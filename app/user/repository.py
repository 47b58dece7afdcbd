# app/user/repository.py
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from app.user.models import User


class UserRepository:
    """Data access contract for users."""

    def get(self, user_id: int, include_tickets: bool = False) -> User | None:
        raise NotImplementedError

    def exists(self, user_id: int) -> bool:
        raise NotImplementedError

    def get_all(self, include_tickets: bool = False) -> list[User]:
        raise NotImplementedError

    def add(self, fields: dict[str, Any]) -> User:
        raise NotImplementedError

    def update(self, user_id: int, fields: dict[str, Any]) -> User | None:
        raise NotImplementedError

    def delete(self, user_id: int) -> int:
        raise NotImplementedError


class SQLUserRepository(UserRepository):
    """UserRepository backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def _select(self, include_tickets: bool):
        stmt = select(User)
        if include_tickets:
            stmt = stmt.options(selectinload(User.created_tickets), selectinload(User.assigned_tickets))
        return stmt

    def get(self, user_id: int, include_tickets: bool = False) -> User | None:
        stmt = self._select(include_tickets).where(User.id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def exists(self, user_id: int) -> bool:
        return self.db.execute(select(User.id).where(User.id == user_id)).first() is not None

    def get_all(self, include_tickets: bool = False) -> list[User]:
        stmt = self._select(include_tickets).order_by(User.id)
        return list(self.db.execute(stmt).scalars().all())

    def add(self, fields: dict[str, Any]) -> User:
        db_user = User(**fields)
        self.db.add(db_user)
        self._commit()
        self.db.refresh(db_user)
        return db_user

    def update(self, user_id: int, fields: dict[str, Any]) -> User | None:
        db_user = self.get(user_id)
        if db_user is None:
            return None
        for field, value in fields.items():
            setattr(db_user, field, value)
        self._commit()
        return db_user

    def delete(self, user_id: int) -> int:
        try:
            result = self.db.execute(delete(User).where(User.id == user_id))
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        return result.rowcount

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
