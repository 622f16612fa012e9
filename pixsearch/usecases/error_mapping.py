"""Translate executor errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from pixsearch.adapters.api_errors import (
    DataError,
    InvalidDataError,
    InvalidResponseError,
    InvalidUrlError,
    TransportError,
)
from pixsearch.domain.messages import ValidationMessages
from pixsearch.domain.outcome import ErrorKind, NetworkError
from pixsearch.domain.ports import UseCaseError

_KIND_CODES = {
    ErrorKind.MALFORMED_URL: "INVALID_URL",
    ErrorKind.NO_CONNECTIVITY: "NO_CONNECTIVITY",
    ErrorKind.DECODE_FAILED: "INVALID_DATA",
    ErrorKind.FORBIDDEN: "FORBIDDEN",
    ErrorKind.WRONG_URL: "INVALID_URL",
    ErrorKind.SERVER_ERROR: "SERVER_ERROR",
}


def map_network_error(error: NetworkError) -> UseCaseError:
    """Map a callback-convention ``NetworkError`` to a stable code.

    The status code is kept on the result so callers can still show it.
    """
    code = _KIND_CODES.get(error.kind, "REQUEST_FAILED")
    return UseCaseError(code, error.message, status=error.status_code)


def map_data_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map awaitable-convention exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised by ``RequestExecutor.request``/``post_request``.
        default_code: Code used for exceptions outside the ``DataError`` family.
        default_message: Message used for such exceptions, else ``str(exc)``.

    Returns:
        UseCaseError describing the failure.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, InvalidUrlError):
        return UseCaseError("INVALID_URL", ValidationMessages.WRONG_URL)
    if isinstance(exc, TransportError):
        return UseCaseError("NO_CONNECTIVITY", ValidationMessages.NO_INTERNET_CONNECTION)
    if isinstance(exc, InvalidResponseError):
        return UseCaseError(
            "INVALID_RESPONSE",
            ValidationMessages.SOMETHING_WRONG_WITH_SERVER,
            status=exc.status,
        )
    if isinstance(exc, InvalidDataError):
        return UseCaseError("INVALID_DATA", str(exc))
    if isinstance(exc, DataError):
        return UseCaseError("REQUEST_FAILED", str(exc))

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


__all__ = ["map_data_error", "map_network_error"]
