from pagekit.models.article import Article

__all__ = [
    "Article",
]
