"""List-backed query source."""

from typing import Any, Callable, Iterable, Sequence, TypeVar

from pagekit.core.pagination import Sort, SortDirection
from pagekit.query.base import QuerySource

T = TypeVar("T")

Filter = Callable[[Any], bool]
Aggregate = Callable[[list[Any]], list[Any]]


def _field_value(row: Any, field: str) -> Any:
    if isinstance(row, dict):
        return row.get(field)
    return getattr(row, field, None)


def _sort_key(field: str) -> Callable[[Any], tuple[bool, Any]]:
    # None sorts first ascending, last descending
    def key(row: Any) -> tuple[bool, Any]:
        value = _field_value(row, field)
        return (value is not None, value)
    return key


class MemoryQuerySource(QuerySource[T]):
    """
    Query over an in-process list of rows (dicts or objects).

    Filters narrow the rows, sorts apply in order (earlier sorts win, later
    ones break ties), aggregates post-process the fetched rows and the range
    slices the sorted rows. The row list is read, never mutated.
    """

    def __init__(
        self,
        rows: Iterable[T],
        filters: Sequence[Filter] = (),
        sorts: Sequence[Sort] = (),
        aggregates: Sequence[Aggregate] = (),
    ):
        self.rows: list[T] = list(rows)
        self.filters: list[Filter] = list(filters)
        self.sorts: list[Sort] = list(sorts)
        self.aggregates: list[Aggregate] = list(aggregates)
        self.range: tuple[int, int] | None = None

    def filter(self, predicate: Filter) -> "MemoryQuerySource[T]":
        self.filters.append(predicate)
        return self

    def _matching(self) -> list[T]:
        return [row for row in self.rows if all(f(row) for f in self.filters)]

    async def count(self) -> int:
        rows = self._matching()
        for aggregate in self.aggregates:
            rows = aggregate(rows)
        return len(rows)

    def clear_aggregates(self) -> None:
        self.aggregates.clear()

    def append_sorts(self, sorts: Sequence[Sort]) -> None:
        self.sorts.extend(sorts)

    def set_range(self, lower: int, upper: int) -> None:
        self.range = (lower, upper)

    async def fetch(self) -> list[T]:
        rows = self._matching()
        # Stable sort from the last criterion to the first
        for sort in reversed(self.sorts):
            rows.sort(key=_sort_key(sort.field), reverse=sort.direction == SortDirection.DESC)
        if self.range is not None:
            lower, upper = self.range
            rows = rows[lower:upper]
        for aggregate in self.aggregates:
            rows = aggregate(rows)
        return rows
