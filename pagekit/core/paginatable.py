"""Per-entity pagination defaults."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from pagekit.core.pagination import Sort

if TYPE_CHECKING:
    from pagekit.core.pagination import Page, Paginated
    from pagekit.core.params import ParameterSource
    from pagekit.query.base import QuerySource

DEFAULT_PAGE_KEY = "page"
DEFAULT_PER_PAGE_KEY = "per"
DEFAULT_PAGE_SIZE = 10


class PaginationDefaults(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    max_page_size: int | None = Field(default=None, ge=1)
    default_sorts: list[Sort] = Field(default_factory=list)
    page_key: str = DEFAULT_PAGE_KEY
    per_page_key: str = DEFAULT_PER_PAGE_KEY


class Paginatable(ABC):
    """
    Mixin for entity types that can be listed page by page.

    Subclasses set `pagination` and implement `page_source()`, which returns a
    fresh query source over all rows of the entity. Pydantic models and Beanie
    documents can mix it in: their metaclass already derives from ABCMeta.
    """

    pagination: ClassVar[PaginationDefaults] = PaginationDefaults()

    @classmethod
    @abstractmethod
    def page_source(cls) -> "QuerySource[Any]":
        raise NotImplementedError(f"{cls.__name__} does not provide a query source")

    @classmethod
    async def paginate(
        cls,
        params: "ParameterSource",
        page_key: str | None = None,
        per_page_key: str | None = None,
        sorts: list[Sort] | None = None,
    ) -> "Page[Any]":
        from pagekit.services.paginator import paginate_request

        return await paginate_request(
            cls.page_source(),
            params,
            defaults=cls.pagination,
            page_key=page_key,
            per_page_key=per_page_key,
            sorts=sorts,
        )

    @classmethod
    async def paginate_response(cls, params: "ParameterSource", **kwargs: Any) -> "Paginated[Any]":
        page = await cls.paginate(params, **kwargs)
        return page.response()
