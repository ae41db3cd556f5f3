"""Query source over a Beanie FindMany query (MongoDB)."""

from typing import Any, Sequence

from beanie.odm.enums import SortDirection as MongoSortDirection
from beanie.odm.queries.find import FindMany

from pagekit.core.pagination import Sort, SortDirection
from pagekit.query.base import QuerySource

_DIRECTIONS = {
    SortDirection.ASC: MongoSortDirection.ASCENDING,
    SortDirection.DESC: MongoSortDirection.DESCENDING,
}

# skip/limit are sent as BSON int64
MAX_BSON_INT = 2**63 - 1


class BeanieQuerySource(QuerySource[Any]):
    """
    Wraps `Model.find(...)`. An aggregation pipeline, when attached, is run
    on fetch after the find filters, sorts, skip and limit.

    A range starting beyond what MongoDB can skip cannot hold any rows, so
    fetch() returns nothing without querying.
    """

    def __init__(self, query: FindMany, pipeline: Sequence[dict[str, Any]] = ()):
        self.query = query
        self.pipeline: list[dict[str, Any]] = list(pipeline)
        self.out_of_range = False

    async def count(self) -> int:
        return await self.query.count()

    def clear_aggregates(self) -> None:
        self.pipeline.clear()

    def append_sorts(self, sorts: Sequence[Sort]) -> None:
        if not sorts:
            return
        # FindMany.sort appends to the existing sort expressions
        self.query = self.query.sort(*[(s.field, _DIRECTIONS[s.direction]) for s in sorts])

    def set_range(self, lower: int, upper: int) -> None:
        if lower >= MAX_BSON_INT:
            self.out_of_range = True
            return
        self.out_of_range = False
        self.query = self.query.skip(lower).limit(min(upper - lower, MAX_BSON_INT))

    async def fetch(self) -> list[Any]:
        if self.out_of_range:
            return []
        if self.pipeline:
            return await self.query.aggregate(self.pipeline).to_list()
        return await self.query.to_list()
