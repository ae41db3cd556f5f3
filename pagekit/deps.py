"""Shared FastAPI dependencies."""

from typing import Any, Awaitable, Callable

from fastapi import Request

from pagekit.core.config import get_settings
from pagekit.core.logging import bind_page_request
from pagekit.core.paginatable import Paginatable
from pagekit.core.pagination import PageRequest
from pagekit.core.params import QueryParameters
from pagekit.models.article import Article
from pagekit.query.base import QuerySource
from pagekit.query.memory import MemoryQuerySource
from pagekit.services.resolver import resolve_from_parameters


def page_request(model: type[Paginatable]) -> Callable[[Request], Awaitable[PageRequest]]:
    """Dependency factory: resolve page/per from the query string using the model's defaults."""

    async def dependency(request: Request) -> PageRequest:
        resolved = resolve_from_parameters(QueryParameters(request.query_params), model.pagination)
        bind_page_request(resolved)
        return resolved

    return dependency


def get_article_source(request: Request) -> QuerySource[Any]:
    """Dependency: a fresh query over all articles for the configured storage backend."""
    if get_settings().storage_backend == "mongo":
        return Article.page_source()
    return MemoryQuerySource(request.app.state.articles)
