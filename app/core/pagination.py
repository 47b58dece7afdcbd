# app/core/pagination.py
import math
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import Field

from app.core.schemas import MAX_DB_ID, CamelModel

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# keeps the row offset inside a 64-bit integer
MAX_PAGE = MAX_DB_ID // MAX_LIMIT

T = TypeVar("T")


def clamp_limit(limit: int) -> int:
    return min(limit, MAX_LIMIT)


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


@dataclass
class PageResult:
    """One page of rows plus the numbers needed to navigate the rest."""

    data: list[Any] = field(default_factory=list)
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    total: int = 0
    total_pages: int = 0


class Page(CamelModel, Generic[T]):
    data: list[T]
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1, le=MAX_LIMIT)
    total: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
