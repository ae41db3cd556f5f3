import pytest
from pydantic import ValidationError

from pagekit.core.pagination import Page, PageRequest


def test_derived_fields_middle_page():
    page = Page(number=2, data=[1, 2, 3], size=3, total=10)
    assert page.total_pages == 4
    assert page.has_next_page
    assert page.has_previous_page


def test_derived_fields_last_page():
    page = Page(number=4, data=[10], size=3, total=10)
    assert not page.has_next_page
    assert page.has_previous_page


def test_derived_fields_empty():
    page = Page(number=1, data=[], size=10, total=0)
    assert page.total_pages == 0
    assert not page.has_next_page
    assert not page.has_previous_page


def test_page_is_immutable():
    page = Page(number=1, data=[], size=10, total=0)
    with pytest.raises(ValidationError):
        page.number = 2


def test_map_keeps_metadata():
    page = Page(number=2, data=[{"n": 1}, {"n": 2}], size=2, total=5)
    mapped = page.map(lambda row: row["n"] * 10)
    assert mapped.data == [10, 20]
    assert (mapped.number, mapped.size, mapped.total) == (2, 2, 5)


def test_response_envelope():
    out = Page(number=1, data=["a", "b"], size=2, total=5).response()
    assert out.model_dump() == {
        "data": ["a", "b"],
        "page": {
            "position": {"current": 1, "next": 2, "previous": None, "max": 3},
            "data": {"per": 2, "total": 5},
        },
    }


def test_response_past_last_page():
    out = Page(number=9, data=[], size=2, total=5).response()
    assert out.page.position.next is None
    assert out.page.position.previous == 8


def test_page_request_bounds():
    req = PageRequest(number=3, size=10)
    assert (req.lower_bound, req.upper_bound) == (20, 30)


@pytest.mark.parametrize("number,size", [(0, 10), (1, 0), (-1, -1)])
def test_page_request_rejects_out_of_range(number, size):
    with pytest.raises(ValidationError):
        PageRequest(number=number, size=size)
