"""
Shared schema building blocks: timestamps and pagination.
"""

import datetime
import math
from dataclasses import dataclass
from typing import Annotated, Generic, Optional, TypeVar

from pydantic import AfterValidator, BaseModel

T = TypeVar("T")


def to_naive_utc(value: datetime.datetime) -> datetime.datetime:
    # Columns hold naive UTC datetimes.
    if value.tzinfo is not None:
        value = value.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return value


UtcDateTime = Annotated[datetime.datetime, AfterValidator(to_naive_utc)]


@dataclass(frozen=True)
class DateRange:
    """Inclusive date filter; either bound may be open."""
    start: Optional[datetime.datetime] = None
    end: Optional[datetime.datetime] = None


@dataclass(frozen=True)
class PageParams:
    """1-based page number and page size."""
    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class Pagination(BaseModel):
    total: int
    page: int
    limit: int
    pages: int


class Page(BaseModel, Generic[T]):
    """Paginated list response."""
    data: list[T]
    pagination: Pagination

    @classmethod
    def build(cls, data: list[T], total: int, params: PageParams) -> "Page[T]":
        return cls(data=data, pagination=Pagination(total=total, page=params.page, limit=params.limit,
                                                    pages=math.ceil(total / params.limit), ), )


class Message(BaseModel):
    message: str
