"""Generic typed request executor.

Two calling conventions share one transport, codec and connectivity check:

Callback convention (``execute`` / ``perform``):
    Any 2xx status decodes into the requested shape. 403, 405 and every other
    status map to ``NetworkError`` kinds carrying the status code. A missing
    response is classified as status 404. Missing connectivity is reported
    as a non-terminal warning and the request is still issued.

Awaitable convention (``request`` / ``post_request``):
    Only status 200 succeeds. Failures raise the ``DataError`` family from
    ``pixsearch.adapters.api_errors``.

Dependencies:
    - ``pixsearch.adapters.http_client.HttpSession`` for network I/O.
    - ``pixsearch.adapters.codec.PydanticJsonCodec`` (or any ``JsonCodecPort``).
    - ``concurrent.futures.ThreadPoolExecutor`` for callback dispatch and
      ``asyncio.to_thread`` for the coroutine entry points.

Call context:
    - Constructed once by ``pixsearch.app.composition`` and passed to adapters
      such as ``PixabayPhotoSearch``.
"""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Optional, Type, TypeVar, Union
from urllib.parse import urlsplit

import requests

from pixsearch.adapters.api_errors import (
    CodecError,
    InvalidDataError,
    InvalidResponseError,
    InvalidUrlError,
    TransportError,
    body_preview,
)
from pixsearch.adapters.codec import PydanticJsonCodec
from pixsearch.adapters.connectivity import SocketConnectivityCheck
from pixsearch.adapters.http_client import HttpSession
from pixsearch.domain.messages import ValidationMessages
from pixsearch.domain.outcome import ErrorKind, Failure, NetworkError, Outcome, Success
from pixsearch.domain.ports import ConnectivityPort, HttpMethod, JsonCodecPort

T = TypeVar("T")
R = TypeVar("R")

# Status assumed when the transport produced no response at all.
NO_RESPONSE_STATUS = 404

Completion = Callable[[Outcome[Any]], None]


def is_well_formed_url(endpoint: Any) -> bool:
    """Return True for absolute http(s) URLs with a host and no whitespace."""
    if not isinstance(endpoint, str) or not endpoint:
        return False
    if any(ch.isspace() or ord(ch) < 0x20 for ch in endpoint):
        return False
    try:
        parts = urlsplit(endpoint)
        parts.port  # raises ValueError on a non-numeric or out-of-range port
    except ValueError:
        return False
    return parts.scheme.lower() in ("http", "https") and bool(parts.hostname)


def _coerce_method(method: Union[HttpMethod, str]) -> HttpMethod:
    if isinstance(method, HttpMethod):
        return method
    return HttpMethod(str(method).strip().upper())


class RequestExecutor:
    """Perform typed HTTP calls and classify their outcomes.

    Each call owns its own request/response pair; no state is shared between
    concurrent calls apart from the transport session and the worker pool.
    """

    def __init__(
        self,
        session: Optional[HttpSession] = None,
        *,
        connectivity: Optional[ConnectivityPort] = None,
        codec: Optional[JsonCodecPort] = None,
        max_workers: int = 4,
    ) -> None:
        self.session = session or HttpSession()
        self.connectivity = connectivity or SocketConnectivityCheck()
        self.codec = codec or PydanticJsonCodec()
        self._pool = ThreadPoolExecutor(
            max_workers=max(1, int(max_workers)),
            thread_name_prefix="pixsearch-request",
        )
        self._log = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Callback convention
    # ------------------------------------------------------------------
    def execute(
        self,
        endpoint: str,
        method: Union[HttpMethod, str],
        expected_type: Type[T],
        completion: Optional[Completion] = None,
        *,
        params: Optional[Dict[str, Any]] = None,
    ) -> "Future[Outcome[T]]":
        """Dispatch a request on the worker pool without blocking the caller.

        Args:
            endpoint: URL string of the remote resource.
            method: HTTP verb placed on the request.
            expected_type: Shape the 2xx body is decoded into.
            completion: Optional callback. Receives the connectivity warning
                (a ``Failure`` whose error is not terminal) when the device
                is offline, then exactly one terminal outcome.
            params: Optional query parameters appended to ``endpoint``.

        Returns:
            Future resolving to the terminal outcome.
        """

        def _warn(error: NetworkError) -> None:
            if completion is not None:
                completion(Failure(error))

        def _run() -> Outcome[T]:
            outcome = self.perform(
                endpoint, method, expected_type, params=params, on_warning=_warn
            )
            if completion is not None:
                completion(outcome)
            return outcome

        return self._pool.submit(_run)

    def perform(
        self,
        endpoint: str,
        method: Union[HttpMethod, str],
        expected_type: Type[T],
        *,
        params: Optional[Dict[str, Any]] = None,
        on_warning: Optional[Callable[[NetworkError], None]] = None,
    ) -> Outcome[T]:
        """Run one request on the calling thread and return its terminal outcome.

        Every 2xx body is decoded into ``expected_type``. Exceptions raised by
        ``on_warning`` are logged and do not stop the request.
        """
        if not is_well_formed_url(endpoint):
            self._log.warning("Rejected malformed URL %r", endpoint)
            return Failure(NetworkError(ErrorKind.MALFORMED_URL, ValidationMessages.WRONG_URL))

        verb = _coerce_method(method)
        if not self.connectivity.is_connected():
            warning = NetworkError(
                ErrorKind.NO_CONNECTIVITY, ValidationMessages.NO_INTERNET_CONNECTION
            )
            self._log.warning("No connectivity detected; issuing %s %s anyway.", verb.value, endpoint)
            if on_warning is not None:
                try:
                    on_warning(warning)
                except Exception:
                    # The warning is non-terminal; the request must still go out.
                    self._log.exception("Connectivity warning handler failed for %s", endpoint)

        resp: Optional[requests.Response] = None
        try:
            resp = self.session.send(verb.value, endpoint, params=params)
        except TransportError as exc:
            self._log.warning("%s %s failed without response: %s", verb.value, endpoint, exc)

        status = resp.status_code if resp is not None else NO_RESPONSE_STATUS
        self._log.info("%s %s -> HTTP %s", verb.value, endpoint, status)
        if resp is not None and self._log.isEnabledFor(logging.DEBUG):
            self._log.debug("Response body: %r", body_preview(resp))
        return self._classify(status, resp, expected_type)

    def _classify(
        self,
        status: int,
        resp: Optional[requests.Response],
        expected_type: Type[T],
    ) -> Outcome[T]:
        if 200 <= status < 300:
            try:
                value = self.codec.decode(resp.content if resp is not None else b"", expected_type)
            except CodecError as exc:
                self._log.warning("Decoding HTTP %s body failed: %s", status, exc)
                return Failure(NetworkError(ErrorKind.DECODE_FAILED, str(exc), status))
            return Success(value)
        if status == 403:
            return Failure(NetworkError(ErrorKind.FORBIDDEN, ValidationMessages.FORBIDDEN, status))
        if status == 405:
            return Failure(NetworkError(ErrorKind.WRONG_URL, ValidationMessages.WRONG_URL, status))
        return Failure(
            NetworkError(ErrorKind.SERVER_ERROR, ValidationMessages.SOMETHING_WRONG_WITH_SERVER, status)
        )

    # ------------------------------------------------------------------
    # Awaitable convention
    # ------------------------------------------------------------------
    async def request(self, url: str, response_type: Type[T]) -> T:
        """GET ``url`` and decode a status-200 body into ``response_type``.

        Raises:
            InvalidUrlError: ``url`` is not a well-formed http(s) URL.
            TransportError: No response was received.
            InvalidResponseError: Status was anything but 200.
            InvalidDataError: Body did not match ``response_type``.
        """
        context = f"GET {url}"
        if not is_well_formed_url(url):
            raise InvalidUrlError(f"Invalid URL: {url!r}", context=context)
        resp = await asyncio.to_thread(self.session.send, HttpMethod.GET.value, url)
        return self._decode_200(resp, response_type, context)

    async def post_request(self, url: str, body: Any, response_type: Type[R]) -> R:
        """POST ``body`` as JSON and decode a status-200 body into ``response_type``.

        Raises:
            InvalidUrlError: ``url`` is not a well-formed http(s) URL.
            InvalidDataError: ``body`` could not be encoded or the response
                did not match ``response_type``.
            TransportError: No response was received.
            InvalidResponseError: Status was anything but 200.
        """
        context = f"POST {url}"
        if not is_well_formed_url(url):
            raise InvalidUrlError(f"Invalid URL: {url!r}", context=context)
        try:
            data = self.codec.encode(body)
        except CodecError as exc:
            raise InvalidDataError(str(exc), context=context) from exc
        resp = await asyncio.to_thread(
            self.session.send, HttpMethod.POST.value, url, data=data
        )
        return self._decode_200(resp, response_type, context)

    def _decode_200(self, resp: requests.Response, response_type: Type[T], context: str) -> T:
        status = resp.status_code
        self._log.info("%s -> HTTP %s", context, status)
        if status != 200:
            raise InvalidResponseError.from_response(resp, context)
        try:
            return self.codec.decode(resp.content, response_type)
        except CodecError as exc:
            raise InvalidDataError(str(exc), context=context) from exc

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def close(self) -> None:
        """Wait for outstanding callback calls, then release the transport."""
        self._pool.shutdown(wait=True)
        self.session.close()

    def __enter__(self) -> "RequestExecutor":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = ["NO_RESPONSE_STATUS", "RequestExecutor", "is_well_formed_url"]
