"""Page-number pagination over any countable, range-limited query."""

from pagekit.core.exceptions import InvalidPageNumber, InvalidPageSize, PaginationError
from pagekit.core.paginatable import Paginatable, PaginationDefaults
from pagekit.core.pagination import Page, PageRequest, Paginated, Sort, SortDirection
from pagekit.core.params import ParameterSource, QueryParameters
from pagekit.query.base import QuerySource
from pagekit.query.memory import MemoryQuerySource
from pagekit.services.paginator import paginate, paginate_page, paginate_request, paginate_response
from pagekit.services.resolver import resolve_explicit, resolve_from_parameters

__all__ = [
    "InvalidPageNumber",
    "InvalidPageSize",
    "MemoryQuerySource",
    "Page",
    "PageRequest",
    "Paginatable",
    "Paginated",
    "PaginationDefaults",
    "PaginationError",
    "ParameterSource",
    "QueryParameters",
    "QuerySource",
    "Sort",
    "SortDirection",
    "paginate",
    "paginate_page",
    "paginate_request",
    "paginate_response",
    "resolve_explicit",
    "resolve_from_parameters",
]
