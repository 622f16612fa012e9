"""Exception family for the awaitable calling convention.

These errors are independent from the ``NetworkError`` kinds used by the
callback convention; only the 200 check and URL validity are classified.
"""

from __future__ import annotations

from typing import Any, Optional


class DataError(RuntimeError):
    """Base class for awaitable request failures."""

    def __init__(self, message: str, *, context: Optional[str] = None) -> None:
        super().__init__(message)
        self.context = context


class InvalidUrlError(DataError):
    """Endpoint string is not a well-formed http(s) URL."""


class InvalidResponseError(DataError):
    """Response status was anything other than 200.

    ``status`` and ``detail`` are kept for diagnostics only; callers branch on
    the exception type, never on the code.
    """

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        detail: Optional[str] = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, context=context)
        self.status = status
        self.detail = detail

    @classmethod
    def from_response(cls, resp: Any, context: str) -> "InvalidResponseError":
        status = getattr(resp, "status_code", None)
        detail = response_detail(resp)
        message = f"{context}: HTTP {status}"
        if detail:
            message = f"{message} ({detail})"
        return cls(message, status=status, detail=detail, context=context)


class InvalidDataError(DataError):
    """Body could not be encoded or decoded into the requested shape."""


class TransportError(DataError):
    """No response was received (connection refused, timeout, DNS...)."""


class CodecError(ValueError):
    """Raised by the JSON codec when a value cannot be encoded or decoded."""


_BODY_PREVIEW_CHARS = 200


def body_preview(resp: Any) -> str:
    """First characters of the response body as text, for log lines."""
    text = getattr(resp, "text", None) or ""
    return text.strip()[:_BODY_PREVIEW_CHARS]


def response_detail(resp: Any) -> Optional[str]:
    """Short explanation a server attached to a rejected request.

    Pixabay answers errors in plain text (``[ERROR 400] "q" is too long``);
    JSON error objects are read from their ``error`` or ``message`` field.
    """
    text = body_preview(resp)
    if not text:
        return None
    if text[0] not in "{[":
        return text.splitlines()[0]
    try:
        body = resp.json()
    except ValueError:
        return text.splitlines()[0]
    if isinstance(body, dict):
        for field in ("error", "message"):
            if isinstance(body.get(field), str) and body[field].strip():
                return body[field].strip()
    return None


__all__ = [
    "CodecError",
    "DataError",
    "InvalidDataError",
    "InvalidResponseError",
    "InvalidUrlError",
    "TransportError",
    "body_preview",
    "response_detail",
]
