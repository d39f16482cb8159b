import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of DTOs plus the numbers needed to render pagination."""

    items: list[T] = field(default_factory=list)
    page: int = 1
    limit: int = 20
    total_count: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.limit) if self.limit else 0

    @property
    def has_next(self) -> bool:
        return self.page * self.limit < self.total_count

    @property
    def has_prev(self) -> bool:
        return self.page > 1


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


class PaginationResponse(BaseModel):
    current: int
    total: int
    has_next: bool
    has_prev: bool
    total_count: int

    @classmethod
    def from_page(cls, page: Page) -> "PaginationResponse":
        return cls(
            current=page.page,
            total=page.total_pages,
            has_next=page.has_next,
            has_prev=page.has_prev,
            total_count=page.total_count,
        )
