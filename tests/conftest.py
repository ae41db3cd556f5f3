import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Memory backend: no MongoDB needed
os.environ.setdefault("STORAGE_BACKEND", "memory")

from pagekit.query.memory import MemoryQuerySource  # noqa: E402


class RecordingQuerySource(MemoryQuerySource):
    """Memory source that records the order of calls made against it."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls: list[str] = []

    async def count(self) -> int:
        self.calls.append("count")
        return await super().count()

    def clear_aggregates(self) -> None:
        self.calls.append("clear_aggregates")
        super().clear_aggregates()

    def append_sorts(self, sorts) -> None:
        self.calls.append("append_sorts")
        super().append_sorts(sorts)

    def set_range(self, lower: int, upper: int) -> None:
        self.calls.append("set_range")
        super().set_range(lower, upper)

    async def fetch(self):
        self.calls.append("fetch")
        return await super().fetch()


def _make_rows(n: int) -> list[dict]:
    return [{"id": i, "name": f"row-{i}"} for i in range(1, n + 1)]


@pytest.fixture
def make_rows():
    return _make_rows


@pytest.fixture
def rows_25() -> list[dict]:
    return _make_rows(25)


@pytest.fixture
def recording_source():
    def factory(rows, **kwargs) -> RecordingQuerySource:
        return RecordingQuerySource(rows, **kwargs)
    return factory


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    from pagekit.main import app
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
