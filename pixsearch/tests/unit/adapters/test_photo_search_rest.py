from __future__ import annotations

from pixsearch.adapters.photo_search_rest import DEFAULT_BASE_URL, PixabayPhotoSearch
from pixsearch.domain.outcome import ErrorKind, Failure, Success
from pixsearch.tests.unit.helpers import PIXABAY_PAYLOAD, ResponseStub, make_executor


def test_search_builds_pixabay_query() -> None:
    executor, session = make_executor([ResponseStub(PIXABAY_PAYLOAD)])
    adapter = PixabayPhotoSearch(executor, api_key="secret")

    outcome = adapter.search("yellow flowers", page=2, per_page=500)

    assert isinstance(outcome, Success)
    assert outcome.value.hits[0].id == 195893
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == DEFAULT_BASE_URL
    assert call["params"] == {
        "key": "secret",
        "q": "yellow flowers",
        "image_type": "photo",
        "safesearch": "true",
        "page": 2,
        "per_page": 200,
    }


def test_search_forwards_connectivity_warning() -> None:
    executor, _ = make_executor([ResponseStub(PIXABAY_PAYLOAD)], connected=False)
    adapter = PixabayPhotoSearch(executor, api_key="k")
    warnings = []

    outcome = adapter.search("cat", on_warning=warnings.append)

    assert [w.kind for w in warnings] == [ErrorKind.NO_CONNECTIVITY]
    assert isinstance(outcome, Success)


def test_search_with_bad_base_url_is_malformed() -> None:
    executor, session = make_executor([])
    adapter = PixabayPhotoSearch(executor, api_key="k", base_url="pixabay api")

    outcome = adapter.search("cat")

    assert isinstance(outcome, Failure)
    assert outcome.error.kind is ErrorKind.MALFORMED_URL
    assert session.calls == []


def test_search_async_reports_through_completion() -> None:
    executor, session = make_executor([ResponseStub("[ERROR 400] per_page out of range", status_code=400)])
    adapter = PixabayPhotoSearch(executor, api_key="k", safe_search=False)
    received = []

    outcome = adapter.search_async("dog", received.append, per_page=1).result(timeout=5)
    executor.close()

    assert received == [outcome]
    assert isinstance(outcome, Failure)
    assert outcome.error.kind is ErrorKind.SERVER_ERROR
    assert outcome.error.status_code == 400
    assert session.calls[0]["params"]["per_page"] == 3
    assert session.calls[0]["params"]["safesearch"] == "false"
