"""Result types for the callback calling convention.

A call through ``RequestExecutor.execute`` ends in exactly one terminal
``Outcome``: either ``Success`` wrapping the decoded value or ``Failure``
wrapping a classified ``NetworkError``. The connectivity warning is the only
non-terminal failure and is reported in addition to the terminal outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure classes of the callback convention."""

    MALFORMED_URL = "malformed_url"
    NO_CONNECTIVITY = "no_connectivity"
    DECODE_FAILED = "decode_failed"
    FORBIDDEN = "forbidden"
    WRONG_URL = "wrong_url"
    SERVER_ERROR = "server_error"


@dataclass(frozen=True)
class NetworkError:
    """Classified failure with a message and optional HTTP status code.

    Attributes:
        kind: Failure class used by callers to branch on.
        message: Human-readable description.
        status_code: HTTP status of the response, ``None`` when no request
            was attempted or the failure is a local warning.
    """

    kind: ErrorKind
    message: str
    status_code: Optional[int] = None

    @property
    def is_terminal(self) -> bool:
        """Whether this error ends the call (connectivity is only a warning)."""
        return self.kind is not ErrorKind.NO_CONNECTIVITY

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (HTTP {self.status_code})"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    error: NetworkError

    @property
    def ok(self) -> bool:
        return False


Outcome = Union[Success[T], Failure]


__all__ = ["ErrorKind", "Failure", "NetworkError", "Outcome", "Success"]
