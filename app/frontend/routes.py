# app/frontend/routes.py
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.core.pagination import DEFAULT_LIMIT, MAX_LIMIT
from app.ticket.models import TicketStatus

FRONTEND_DIR = Path(__file__).resolve().parent
STATIC_DIR = FRONTEND_DIR / "static"

router = APIRouter(tags=["Frontend"])
templates = Jinja2Templates(directory=str(FRONTEND_DIR / "templates"))

PAGE_SIZE_CHOICES = [5, DEFAULT_LIMIT, 25, 50, MAX_LIMIT]


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def ticket_list(request: Request):
    return templates.TemplateResponse(
        request,
        "tickets.html",
        {
            "title": request.app.title,
            "statuses": [s.value for s in TicketStatus],
            "default_limit": DEFAULT_LIMIT,
            "page_sizes": PAGE_SIZE_CHOICES,
        },
    )
