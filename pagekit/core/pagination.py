"""Pagination value types: page requests, sorts, pages and the response envelope."""

import math
from enum import Enum
from typing import Callable, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")
U = TypeVar("U")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class Sort(BaseModel):
    """Single sort criterion."""

    model_config = ConfigDict(frozen=True)

    field: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def asc(cls, field: str) -> "Sort":
        return cls(field=field, direction=SortDirection.ASC)

    @classmethod
    def desc(cls, field: str) -> "Sort":
        return cls(field=field, direction=SortDirection.DESC)


class PageRequest(BaseModel):
    """Validated (page number, page size) pair. Page numbers are 1-based."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1)
    size: int = Field(ge=1)

    @property
    def lower_bound(self) -> int:
        return (self.number - 1) * self.size

    @property
    def upper_bound(self) -> int:
        return self.lower_bound + self.size


class Position(BaseModel):
    current: int
    next: int | None = None
    previous: int | None = None
    max: int


class PageData(BaseModel):
    per: int
    total: int


class PageInfo(BaseModel):
    position: Position
    data: PageData


class Paginated(BaseModel, Generic[T]):
    """Response envelope: the rows plus where this page sits in the full set."""

    data: list[T]
    page: PageInfo


class Page(BaseModel, Generic[T]):
    """
    One page of an ordered result set.

    `number` and `size` are echoed from the request, `total` is the row count
    taken for this request. Count and fetch are separate reads, so `total` may
    be stale relative to `data` when the store is written to concurrently.
    """

    model_config = ConfigDict(frozen=True)

    number: int
    data: list[T]
    size: int
    total: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total / self.size)

    @property
    def has_next_page(self) -> bool:
        return self.number * self.size < self.total

    @property
    def has_previous_page(self) -> bool:
        return self.number > 1

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        """Same page, every row passed through fn."""
        return Page(number=self.number, data=[fn(row) for row in self.data], size=self.size, total=self.total)

    def response(self) -> Paginated[T]:
        last = self.total_pages
        return Paginated(
            data=list(self.data),
            page=PageInfo(
                position=Position(
                    current=self.number,
                    next=self.number + 1 if self.number < last else None,
                    previous=self.number - 1 if self.number > 1 else None,
                    max=last,
                ),
                data=PageData(per=self.size, total=self.total),
            ),
        )
