"""Contract-focused tests for the photo search use case."""

from __future__ import annotations

import pytest

from pixsearch.domain.messages import ValidationMessages
from pixsearch.domain.models import PhotoSearchResponse
from pixsearch.domain.outcome import ErrorKind, Failure, NetworkError, Success
from pixsearch.domain.ports import UseCaseError
from pixsearch.tests.unit.helpers import PIXABAY_PAYLOAD
from pixsearch.usecases.search_photos import SearchPhotos


class FakePhotoSearch:
    def __init__(self, outcome, *, warn: bool = False) -> None:
        self.outcome = outcome
        self.warn = warn
        self.calls = []

    def search(self, query, *, page=1, per_page=20, on_warning=None):
        self.calls.append({"query": query, "page": page, "per_page": per_page})
        if self.warn and on_warning is not None:
            on_warning(NetworkError(ErrorKind.NO_CONNECTIVITY, ValidationMessages.NO_INTERNET_CONNECTION))
        return self.outcome


def test_search_photos_returns_hits_and_totals() -> None:
    port = FakePhotoSearch(Success(PhotoSearchResponse.model_validate(PIXABAY_PAYLOAD)))
    uc = SearchPhotos(port)

    result = uc("  flowers ", page=3, per_page=50)

    assert port.calls == [{"query": "flowers", "page": 3, "per_page": 50}]
    assert result.query == "flowers"
    assert [hit.id for hit in result.hits] == [195893]
    assert result.total == 4692
    assert result.total_hits == 500
    assert result.has_more is True


@pytest.mark.parametrize("query", ["", "   ", None])
def test_search_photos_requires_input(query) -> None:
    port = FakePhotoSearch(Success(PhotoSearchResponse()))
    uc = SearchPhotos(port)

    with pytest.raises(UseCaseError) as excinfo:
        uc(query)

    assert excinfo.value.code == "SEARCH_INPUT_REQUIRED"
    assert excinfo.value.message == ValidationMessages.IMAGE_INPUT
    assert port.calls == []


def test_search_photos_maps_failure_to_use_case_error() -> None:
    port = FakePhotoSearch(
        Failure(NetworkError(ErrorKind.FORBIDDEN, ValidationMessages.FORBIDDEN, 403))
    )
    uc = SearchPhotos(port)

    with pytest.raises(UseCaseError) as excinfo:
        uc("cats")

    assert excinfo.value.code == "FORBIDDEN"
    assert excinfo.value.status == 403


def test_search_photos_forwards_connectivity_warning() -> None:
    warnings = []
    port = FakePhotoSearch(Success(PhotoSearchResponse()), warn=True)
    uc = SearchPhotos(port, on_warning=warnings.append)

    result = uc("cats")

    assert warnings == [ValidationMessages.NO_INTERNET_CONNECTION]
    assert result.hits == []
    assert result.has_more is False


def test_search_photos_result_reflects_paging_actually_sent() -> None:
    payload = dict(PIXABAY_PAYLOAD, totalHits=3)
    port = FakePhotoSearch(Success(PhotoSearchResponse.model_validate(payload)))
    uc = SearchPhotos(port)

    result = uc("flower", page=0, per_page=1)

    assert port.calls == [{"query": "flower", "page": 1, "per_page": 3}]
    assert result.page == 1
    assert result.per_page == 3
    assert result.has_more is False
