from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar

from pagekit.core.pagination import Sort

T = TypeVar("T")


class QuerySource(ABC, Generic[T]):
    """A filtered query that can be counted, sorted, range-limited and fetched."""

    @abstractmethod
    async def count(self) -> int:
        """Rows matching the current filters, ignoring any range."""
        ...

    @abstractmethod
    def clear_aggregates(self) -> None:
        """Drop aggregate projections so count() means plain row count."""
        ...

    @abstractmethod
    def append_sorts(self, sorts: Sequence[Sort]) -> None:
        """Add sorts after the ones already set; never replace them."""
        ...

    @abstractmethod
    def set_range(self, lower: int, upper: int) -> None:
        """Restrict fetch() to rows [lower, upper)."""
        ...

    @abstractmethod
    async def fetch(self) -> list[T]:
        ...
