# app/core/schemas.py
from typing import Annotated

from humps import camelize
from pydantic import BaseModel, ConfigDict, Field

# largest value a BIGINT primary or foreign key can hold
MAX_DB_ID = 2**63 - 1

DbId = Annotated[int, Field(le=MAX_DB_ID)]


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; both accepted on input."""

    model_config = ConfigDict(
        alias_generator=camelize,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageOut(CamelModel):
    message: str
    id: int
