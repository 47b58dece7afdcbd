# app/ticket/services.py
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import NotFoundError, ValidationError
from app.core.pagination import PageResult, clamp_limit, page_offset, total_pages
from app.ticket.models import Ticket, TicketStatus
from app.ticket.repository import TicketRepository
from app.ticket.schemas import TicketUpdate
from app.user.repository import UserRepository


class TicketService:
    """Ticket lifecycle: paging, creation, status changes and deletion.

    ``bulk_delete`` is the operation the queue consumer runs; it never raises
    for persistence failures because nobody is waiting on its outcome.
    """

    def __init__(self, tickets: TicketRepository, users: UserRepository):
        self.tickets = tickets
        self.users = users

    def list_page(self, page: int, limit: int) -> PageResult:
        take = clamp_limit(limit)
        items, total = self.tickets.page(page_offset(page, take), take, include_users=True)
        return PageResult(
            data=items,
            page=page,
            limit=take,
            total=total,
            total_pages=total_pages(total, take),
        )

    def get_by_id(self, ticket_id: int) -> Ticket:
        ticket = self.tickets.get(ticket_id, include_users=True)
        if ticket is None:
            raise NotFoundError("Ticket", ticket_id)
        return ticket

    def create(self, title: str, description: str, creator_id: int, assignee_id: int | None = None) -> Ticket:
        if not self.users.exists(creator_id):
            raise NotFoundError("Creator user", creator_id)
        if assignee_id is not None and not self.users.exists(assignee_id):
            raise NotFoundError("Assignee user", assignee_id)

        ticket = self.tickets.add(
            {
                "title": title,
                "description": description,
                "creator_id": creator_id,
                "assignee_id": assignee_id,
                "status": TicketStatus.OPEN,
            }
        )
        logger.info(f"Created ticket {ticket.id} for creator {creator_id}")
        return ticket

    def update_status(self, ticket_id: int, status: TicketStatus) -> Ticket:
        ticket = self.get_by_id(ticket_id)
        ticket.status = status
        return self.tickets.save(ticket)

    def update(self, ticket_id: int, payload: TicketUpdate) -> Ticket:
        fields = payload.model_dump(exclude_unset=True)
        if not fields:
            raise ValidationError("No fields to update")
        for required in ("title", "description", "status"):
            if required in fields and fields[required] is None:
                raise ValidationError(f"{required} cannot be null")

        ticket = self.get_by_id(ticket_id)
        assignee_id = fields.get("assignee_id")
        if assignee_id is not None and not self.users.exists(assignee_id):
            raise NotFoundError("Assignee user", assignee_id)

        for field, value in fields.items():
            setattr(ticket, field, value)
        return self.tickets.save(ticket)

    def delete_one(self, ticket_id: int) -> None:
        if self.tickets.delete(ticket_id) == 0:
            raise NotFoundError("Ticket", ticket_id)
        logger.info(f"Deleted ticket {ticket_id}")

    def bulk_delete(self, ids: list[int]) -> int:
        if not ids:
            logger.warning("Received bulk delete request with no IDs. Skipping.")
            return 0

        joined = ", ".join(str(i) for i in ids)
        try:
            affected = self.tickets.delete_many(ids)
        except (SQLAlchemyError, OverflowError):
            logger.exception(f"Error during bulk deletion for IDs: {joined}")
            return 0

        logger.info(f"Bulk deletion successful for IDs: {joined}. Affected rows: {affected}")
        return affected
