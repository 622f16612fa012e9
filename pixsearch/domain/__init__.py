"""Domain package exports for request outcomes and photo-search models."""

from .messages import ValidationMessages
from .models import PhotoHit, PhotoSearchResponse
from .outcome import ErrorKind, Failure, NetworkError, Outcome, Success
from .ports import HttpMethod

__all__ = [
    "ErrorKind",
    "Failure",
    "HttpMethod",
    "NetworkError",
    "Outcome",
    "PhotoHit",
    "PhotoSearchResponse",
    "Success",
    "ValidationMessages",
]
