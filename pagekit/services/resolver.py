"""Turn explicit arguments or request parameters into a validated PageRequest."""

from pagekit.core.exceptions import InvalidPageNumber, InvalidPageSize
from pagekit.core.paginatable import PaginationDefaults
from pagekit.core.pagination import PageRequest
from pagekit.core.params import ParameterSource

_NO_DEFAULTS = PaginationDefaults()
_UNSET = object()


def resolve_explicit(
    page: int,
    size: int | None = None,
    defaults: PaginationDefaults = _NO_DEFAULTS,
) -> PageRequest:
    """Validate caller-supplied values. Explicit sizes are trusted and never clamped."""
    if size is None:
        size = defaults.default_page_size
    if page <= 0:
        raise InvalidPageNumber(page)
    if size <= 0:
        raise InvalidPageSize(size)
    return PageRequest(number=page, size=size)


def resolve_from_parameters(
    source: ParameterSource,
    defaults: PaginationDefaults = _NO_DEFAULTS,
    page_key: str | None = None,
    per_page_key: str | None = None,
    max_page_size: "int | None | object" = _UNSET,
) -> PageRequest:
    """
    Read page and size from request parameters.

    Missing page means 1, missing size means the model's default size. A size
    above the max (the model's, unless one is passed) is clamped, not rejected.
    """
    if max_page_size is _UNSET:
        max_page_size = defaults.max_page_size
    page = source.get_optional_int(page_key or defaults.page_key)
    if page is None:
        page = 1
    size = source.get_optional_int(per_page_key or defaults.per_page_key)
    if size is None:
        size = defaults.default_page_size
    if max_page_size is not None and size > max_page_size:
        size = max_page_size
    return resolve_explicit(page, size, defaults)
