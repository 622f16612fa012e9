"""User-presentable message texts shared by adapters and use cases."""

from __future__ import annotations


class ValidationMessages:
    NO_INTERNET_CONNECTION = "Please ensure you are connected to the internet and try again."
    SOMETHING_WRONG_WITH_SERVER = "Something went wrong."
    WRONG_URL = "Requested URL is not valid."
    FORBIDDEN = "Access to the requested resource is forbidden."
    IMAGE_INPUT = "Input is required to search for photos"


__all__ = ["ValidationMessages"]
