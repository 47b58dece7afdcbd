# app/ticket/routes.py
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status
from loguru import logger

from app.core.dependencies import get_bulk_delete_publisher, get_ticket_service
from app.core.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_PAGE, Page
from app.core.schemas import MAX_DB_ID, MessageOut
from app.ticket.publisher import BulkDeletePublisher
from app.ticket.schemas import (
    BulkDeleteAccepted,
    BulkDeleteRequest,
    TicketCreate,
    TicketOut,
    TicketStatusUpdate,
    TicketUpdate,
)
from app.ticket.services import TicketService

router = APIRouter(prefix="/tickets", tags=["Tickets"])

TicketId = Annotated[int, Path(le=MAX_DB_ID)]


@router.get("", response_model=Page[TicketOut])
def list_page(
    page: int = Query(default=DEFAULT_PAGE, ge=1, le=MAX_PAGE, description="Page number, starting at 1"),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, description="Items per page (at most 100 are returned)"),
    service: TicketService = Depends(get_ticket_service),
):
    logger.info(f"Request to retrieve tickets: page={page}, limit={limit}")
    return service.list_page(page, limit)


@router.get("/{ticket_id}", response_model=TicketOut)
def get(ticket_id: TicketId, service: TicketService = Depends(get_ticket_service)):
    logger.info(f"Request to retrieve ticket with ID: {ticket_id}")
    return service.get_by_id(ticket_id)


@router.post("", response_model=TicketOut, status_code=status.HTTP_201_CREATED)
def create(ticket: TicketCreate, service: TicketService = Depends(get_ticket_service)):
    logger.info(f"Request to create a new ticket: {ticket.title} by user ID: {ticket.creator_id}")
    return service.create(ticket.title, ticket.description, ticket.creator_id, ticket.assignee_id)


@router.patch("/{ticket_id}/status", response_model=TicketOut)
def update_status(
    ticket_id: TicketId,
    payload: TicketStatusUpdate,
    service: TicketService = Depends(get_ticket_service),
):
    logger.info(f"Request to update status of ticket with ID: {ticket_id} to {payload.status.value}")
    return service.update_status(ticket_id, payload.status)


@router.put("/{ticket_id}", response_model=TicketOut)
def update(ticket_id: TicketId, ticket: TicketUpdate, service: TicketService = Depends(get_ticket_service)):
    logger.info(f"Request to update ticket with ID: {ticket_id}")
    return service.update(ticket_id, ticket)


@router.delete("/{ticket_id}", response_model=MessageOut)
def delete(ticket_id: TicketId, service: TicketService = Depends(get_ticket_service)):
    logger.info(f"Request to delete ticket with ID: {ticket_id}")
    service.delete_one(ticket_id)
    return {"message": "Ticket deleted", "id": ticket_id}


@router.post("/bulk-delete", response_model=BulkDeleteAccepted, status_code=status.HTTP_202_ACCEPTED)
def bulk_delete(
    payload: BulkDeleteRequest,
    publisher: BulkDeletePublisher = Depends(get_bulk_delete_publisher),
):
    publisher.publish(payload.ids)
    return {
        "message": "Bulk delete request accepted and queued for processing.",
        "ids": payload.ids,
    }
