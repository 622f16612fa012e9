from __future__ import annotations

from pixsearch.domain.models import PhotoHit, PhotoSearchResponse
from pixsearch.domain.outcome import ErrorKind, Failure, NetworkError, Success


def test_network_error_str_includes_status_when_present() -> None:
    assert str(NetworkError(ErrorKind.WRONG_URL, "Requested URL is not valid.", 405)) == (
        "Requested URL is not valid. (HTTP 405)"
    )
    assert str(NetworkError(ErrorKind.MALFORMED_URL, "Requested URL is not valid.")) == (
        "Requested URL is not valid."
    )


def test_only_connectivity_is_non_terminal() -> None:
    terminal = {kind: NetworkError(kind, "m").is_terminal for kind in ErrorKind}

    assert terminal.pop(ErrorKind.NO_CONNECTIVITY) is False
    assert all(terminal.values())


def test_outcome_ok_flags() -> None:
    assert Success(1).ok is True
    assert Failure(NetworkError(ErrorKind.SERVER_ERROR, "m", 500)).ok is False


def test_photo_models_ignore_unknown_fields_and_default_missing() -> None:
    response = PhotoSearchResponse.model_validate(
        {"total": 1, "totalHits": 1, "hits": [{"id": 3, "collections": 9}], "extra": True}
    )

    assert response.hits == [PhotoHit(id=3)]
    assert response.hits[0].tag_list == []
    assert PhotoSearchResponse().hits == []
