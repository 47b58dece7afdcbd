# app/user/services.py
from loguru import logger
from sqlalchemy.exc import IntegrityError

from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.user.models import User
from app.user.repository import UserRepository
from app.user.schemas import UserCreate, UserUpdate


class UserService:
    """CRUD for users. Missing users raise NotFoundError on every path."""

    def __init__(self, users: UserRepository):
        self.users = users

    def create(self, payload: UserCreate) -> User:
        try:
            user = self.users.add(payload.model_dump())
        except IntegrityError as e:
            logger.warning(f"User creation rejected for {payload.email}: {e.orig}")
            raise ConflictError(f"A user with email {payload.email} already exists")
        logger.info(f"Created user {user.id}")
        return user

    def list_all(self, include_tickets: bool = True) -> list[User]:
        return self.users.get_all(include_tickets=include_tickets)

    def get_by_id(self, user_id: int, include_tickets: bool = True) -> User:
        user = self.users.get(user_id, include_tickets=include_tickets)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def update(self, user_id: int, payload: UserUpdate) -> User:
        fields = payload.model_dump(exclude_unset=True)
        if not fields:
            raise ValidationError("No fields to update")
        for required in ("name", "email"):
            if required in fields and fields[required] is None:
                raise ValidationError(f"{required} cannot be null")
        if not self.users.exists(user_id):
            raise NotFoundError("User", user_id)

        try:
            self.users.update(user_id, fields)
        except IntegrityError as e:
            logger.warning(f"Update of user {user_id} rejected: {e.orig}")
            raise ConflictError(f"A user with email {fields.get('email')} already exists")

        logger.info(f"Updated user {user_id}: {sorted(fields)}")
        return self.get_by_id(user_id)

    def remove(self, user_id: int) -> None:
        try:
            affected = self.users.delete(user_id)
        except IntegrityError:
            raise ConflictError(f"User {user_id} is still referenced by tickets")
        if affected == 0:
            raise NotFoundError("User", user_id)
        logger.info(f"Deleted user {user_id}")
