"""Count, then fetch one bounded range, then assemble the Page."""

from typing import Sequence, TypeVar

from pagekit.core.exceptions import InvalidPageNumber, InvalidPageSize
from pagekit.core.logging import get_logger
from pagekit.core.paginatable import PaginationDefaults
from pagekit.core.pagination import Page, PageRequest, Paginated, Sort
from pagekit.core.params import ParameterSource
from pagekit.query.base import QuerySource
from pagekit.services.resolver import resolve_explicit, resolve_from_parameters

T = TypeVar("T")

log = get_logger(__name__)

_NO_DEFAULTS = PaginationDefaults()


async def paginate(
    query: QuerySource[T],
    page_request: PageRequest,
    sorts: Sequence[Sort] | None = None,
) -> Page[T]:
    """
    Return one page of `query`.

    The count and the fetch are two separate reads of the same filtered query
    with no transaction around them. Errors from the query source propagate
    unchanged.
    """
    if page_request.number < 1:
        raise InvalidPageNumber(page_request.number)
    if page_request.size < 1:
        raise InvalidPageSize(page_request.size)

    query.clear_aggregates()
    total = await query.count()

    query.set_range(page_request.lower_bound, page_request.upper_bound)
    query.append_sorts(list(sorts or []))
    rows = await query.fetch()

    log.debug("paginate", page=page_request.number, per=page_request.size, total=total, rows=len(rows))
    return Page(number=page_request.number, data=list(rows), size=page_request.size, total=total)


async def paginate_page(
    query: QuerySource[T],
    page: int,
    size: int | None = None,
    sorts: Sequence[Sort] | None = None,
    defaults: PaginationDefaults = _NO_DEFAULTS,
) -> Page[T]:
    """Explicit form: page and size come from the caller."""
    page_request = resolve_explicit(page, size, defaults)
    return await paginate(query, page_request, defaults.default_sorts if sorts is None else sorts)


async def paginate_request(
    query: QuerySource[T],
    params: ParameterSource,
    defaults: PaginationDefaults = _NO_DEFAULTS,
    page_key: str | None = None,
    per_page_key: str | None = None,
    sorts: Sequence[Sort] | None = None,
) -> Page[T]:
    """Request-driven form: page and size come from query parameters."""
    page_request = resolve_from_parameters(params, defaults, page_key=page_key, per_page_key=per_page_key)
    return await paginate(query, page_request, defaults.default_sorts if sorts is None else sorts)


async def paginate_response(
    query: QuerySource[T],
    params: ParameterSource,
    defaults: PaginationDefaults = _NO_DEFAULTS,
    page_key: str | None = None,
    per_page_key: str | None = None,
    sorts: Sequence[Sort] | None = None,
) -> Paginated[T]:
    page = await paginate_request(
        query,
        params,
        defaults=defaults,
        page_key=page_key,
        per_page_key=per_page_key,
        sorts=sorts,
    )
    return page.response()
