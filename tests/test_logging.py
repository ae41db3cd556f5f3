import logging

import pytest
import structlog
from structlog.testing import LogCapture

from pagekit.core.logging import bind_page_request, bind_request_id, clear_request_context
from pagekit.core.pagination import PageRequest
from pagekit.query.memory import MemoryQuerySource
from pagekit.services import paginator

pytestmark = pytest.mark.asyncio


async def test_page_request_is_bound_to_context():
    clear_request_context()
    bind_request_id("rid-9")
    bind_page_request(PageRequest(number=3, size=15))
    assert structlog.contextvars.get_contextvars() == {"request_id": "rid-9", "page": 3, "per": 15}
    clear_request_context()
    assert structlog.contextvars.get_contextvars() == {}


async def test_paginate_logs_the_served_page(monkeypatch, make_rows):
    cap = LogCapture()
    monkeypatch.setattr(
        paginator,
        "log",
        structlog.wrap_logger(None, processors=[cap], wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG)),
    )
    await paginator.paginate(MemoryQuerySource(make_rows(12)), PageRequest(number=2, size=5))
    assert cap.entries == [
        {"event": "paginate", "log_level": "debug", "page": 2, "per": 5, "total": 12, "rows": 5},
    ]
