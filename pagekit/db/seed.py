"""Demo rows for the memory storage backend."""

from datetime import datetime, timedelta, timezone
from typing import Any

_AUTHORS = ["ada", "grace", "linus", "guido"]


def demo_articles(count: int, start: datetime | None = None) -> list[dict[str, Any]]:
    """`count` articles an hour apart, oldest first, shaped like Article documents."""
    start = start or datetime(2024, 1, 1, tzinfo=timezone.utc)
    return [
        {
            "id": f"demo-{i}",
            "title": f"Article {i}",
            "author": _AUTHORS[i % len(_AUTHORS)],
            "body": "",
            "created_at": start + timedelta(hours=i),
        }
        for i in range(1, count + 1)
    ]
