"""Shared transport and port stubs for unit tests."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence, Union

from pixsearch.adapters.api_errors import TransportError
from pixsearch.adapters.request_executor import RequestExecutor
from pixsearch.adapters.connectivity import StaticConnectivity

PIXABAY_PAYLOAD: Dict[str, Any] = {
    "total": 4692,
    "totalHits": 500,
    "hits": [
        {
            "id": 195893,
            "pageURL": "https://pixabay.com/en/blossom-bloom-flower-195893/",
            "type": "photo",
            "tags": "blossom, bloom, flower",
            "previewURL": "https://cdn.pixabay.com/photo/2013/10/15/09/12/flower-195893_150.jpg",
            "previewWidth": 150,
            "previewHeight": 84,
            "webformatURL": "https://pixabay.com/get/35bbf209e13e39d2_640.jpg",
            "largeImageURL": "https://pixabay.com/get/ed6a99fd0a76647_1280.jpg",
            "imageWidth": 4000,
            "imageHeight": 2250,
            "views": 7671,
            "downloads": 6439,
            "likes": 5,
            "comments": 2,
            "user_id": 48777,
            "user": "Josch13",
            "userImageURL": "https://cdn.pixabay.com/user/2013/11/05/02-10-23-764_250x250.jpg",
        }
    ],
}


class ResponseStub:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, payload: Any = None, status_code: int = 200, *, raw: Optional[bytes] = None) -> None:
        self.status_code = status_code
        if raw is not None:
            self.content = raw
        elif payload is None:
            self.content = b""
        else:
            self.content = json.dumps(payload).encode("utf-8")
        self.text = self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.content)


class SessionStub:
    """Records ``send`` calls and replays configured responses or errors."""

    def __init__(self, responses: Sequence[Union[ResponseStub, Exception]]) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def send(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[bytes] = None,
        timeout: Optional[float] = None,
    ) -> ResponseStub:
        self.calls.append({"method": method, "url": url, "params": params, "data": data})
        if not self._responses:
            raise RuntimeError("No stub response configured")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self) -> None:
        self.closed = True


def no_response() -> TransportError:
    return TransportError("No response from stub", context="stub")


def make_executor(
    responses: Sequence[Union[ResponseStub, Exception]],
    *,
    connected: bool = True,
) -> "tuple[RequestExecutor, SessionStub]":
    session = SessionStub(responses)
    executor = RequestExecutor(
        session,  # type: ignore[arg-type]
        connectivity=StaticConnectivity(connected),
    )
    return executor, session
