from datetime import datetime, timedelta, timezone

from pagekit.db.seed import demo_articles


def test_demo_articles_are_hourly_and_aware():
    rows = demo_articles(3)
    assert [r["id"] for r in rows] == ["demo-1", "demo-2", "demo-3"]
    assert rows[0]["created_at"] == datetime(2024, 1, 1, 1, tzinfo=timezone.utc)
    assert rows[2]["created_at"] - rows[1]["created_at"] == timedelta(hours=1)


def test_demo_articles_empty():
    assert demo_articles(0) == []
