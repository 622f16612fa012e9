from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional, Protocol, Type, TypeVar

from pixsearch.domain.models import PhotoSearchResponse
from pixsearch.domain.outcome import NetworkError, Outcome

T = TypeVar("T")


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str, *, status: Optional[int] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status


# ---- Ports (Hexagonal boundaries) ----
class ConnectivityPort(Protocol):
    """Reports network reachability. Synchronous and side-effect free."""

    def is_connected(self) -> bool: ...


class JsonCodecPort(Protocol):
    """Encode typed values to JSON bytes and decode JSON bytes into a shape."""

    def decode(self, data: bytes, target_shape: Type[T]) -> T: ...  # raises CodecError
    def encode(self, value: Any) -> bytes: ...  # raises CodecError


class AsyncJsonPort(Protocol):
    """Awaitable GET returning a body decoded into ``response_type``."""

    async def request(self, url: str, response_type: Type[T]) -> T: ...


class PhotoSearchPort(Protocol):
    """Query an image-search API for photos matching free text."""

    def search(
        self,
        query: str,
        *,
        page: int = 1,
        per_page: int = 20,
        on_warning: Optional[Callable[[NetworkError], None]] = None,
    ) -> Outcome[PhotoSearchResponse]: ...
