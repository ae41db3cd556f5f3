from datetime import datetime
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, field_validator

from pagekit.core.pagination import PageRequest, Paginated
from pagekit.deps import get_article_source, page_request
from pagekit.models.article import Article
from pagekit.query.base import QuerySource
from pagekit.services.paginator import paginate

router = APIRouter()


class ArticleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str | None = None
    title: str
    author: str = ""
    created_at: datetime

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, v: Any) -> str | None:
        return None if v is None else str(v)


@router.get("", response_model=Paginated[ArticleOut])
async def articles_list(
    page: PageRequest = Depends(page_request(Article)),
    query: QuerySource[Any] = Depends(get_article_source),
):
    """List articles, newest first. `?page=` and `?per=` select the page."""
    result = await paginate(query, page, Article.pagination.default_sorts)
    return result.map(ArticleOut.model_validate).response()
