"""Shared Pydantic schemas: timestamps and the list/pagination contract"""

from datetime import datetime
from enum import Enum
from typing import Any, Generic, List, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from workos_sdk.constants import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT

T = TypeVar("T")


class WorkOSModel(BaseModel):
    # New fields added server-side must not break decoding
    model_config = ConfigDict(extra="ignore")


class Timestamps(WorkOSModel):
    created_at: datetime
    updated_at: datetime


class Order(str, Enum):
    ASC = "asc"
    DESC = "desc"


class PaginationParams(BaseModel):
    """
    Cursor pagination parameters accepted by every WorkOS list endpoint

    `before` and `after` are object IDs taken from a previous page's
    list_metadata; only one of them may be set.
    """

    limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT)
    before: Optional[str] = None
    after: Optional[str] = None
    order: Order = Order.DESC

    @model_validator(mode="after")
    def check_single_cursor(self) -> "PaginationParams":
        if self.before and self.after:
            raise ValueError("Only one of 'before' or 'after' may be set")
        return self

    def to_query(self) -> List[Tuple[str, Any]]:
        return [
            ("limit", self.limit),
            ("before", self.before),
            ("after", self.after),
            ("order", self.order),
        ]


class ListMetadata(WorkOSModel):
    before: Optional[str] = None
    after: Optional[str] = None


class PaginatedList(WorkOSModel, Generic[T]):
    data: List[T]
    list_metadata: ListMetadata = Field(default_factory=ListMetadata)

    @property
    def has_more(self) -> bool:
        """True when another page exists after this one"""
        return self.list_metadata.after is not None
