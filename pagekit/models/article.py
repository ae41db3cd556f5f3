from datetime import datetime, timezone
from typing import ClassVar

from beanie import Document
from pydantic import Field

from pagekit.core.paginatable import Paginatable, PaginationDefaults
from pagekit.core.pagination import Sort
from pagekit.query.beanie import BeanieQuerySource


class Article(Document, Paginatable):
    title: str
    author: str = ""
    body: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # newest first; _id breaks ties between articles created in the same instant
    pagination: ClassVar[PaginationDefaults] = PaginationDefaults(
        default_page_size=20,
        max_page_size=100,
        default_sorts=[Sort.desc("created_at"), Sort.desc("_id")],
    )

    class Settings:
        name = "articles"
        indexes = [
            [("created_at", -1)],
        ]

    @classmethod
    def page_source(cls) -> BeanieQuerySource:
        return BeanieQuerySource(cls.find_all())
