"""Pixabay image-search adapter implementing ``PhotoSearchPort``.

The API is queried with ``GET <base_url>?key=<api_key>&q=<query>`` and the
JSON body is decoded into ``PhotoSearchResponse`` by the request executor.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import Any, Callable, Dict, Optional

from pixsearch.adapters.request_executor import Completion, RequestExecutor
from pixsearch.domain.models import PhotoSearchResponse, clamp_paging
from pixsearch.domain.outcome import NetworkError, Outcome
from pixsearch.domain.ports import HttpMethod, PhotoSearchPort

DEFAULT_BASE_URL = "https://pixabay.com/api/"


class PixabayPhotoSearch(PhotoSearchPort):
    """Build search endpoints and delegate the call to ``RequestExecutor``."""

    def __init__(
        self,
        executor: RequestExecutor,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        image_type: str = "photo",
        safe_search: bool = True,
    ) -> None:
        self.executor = executor
        self.api_key = api_key
        self.base_url = base_url
        self.image_type = image_type
        self.safe_search = safe_search
        self._log = logging.getLogger(__name__)

    def search(
        self,
        query: str,
        *,
        page: int = 1,
        per_page: int = 20,
        on_warning: Optional[Callable[[NetworkError], None]] = None,
    ) -> Outcome[PhotoSearchResponse]:
        self._log.debug("Searching photos for %r (page %s)", query, page)
        return self.executor.perform(
            self.base_url,
            HttpMethod.GET,
            PhotoSearchResponse,
            params=self._params(query, page=page, per_page=per_page),
            on_warning=on_warning,
        )

    def search_async(
        self,
        query: str,
        completion: Completion,
        *,
        page: int = 1,
        per_page: int = 20,
    ) -> "Future[Outcome[PhotoSearchResponse]]":
        """Same as ``search`` but dispatched on the executor's worker pool."""
        return self.executor.execute(
            self.base_url,
            HttpMethod.GET,
            PhotoSearchResponse,
            completion,
            params=self._params(query, page=page, per_page=per_page),
        )

    def _params(self, query: str, *, page: int, per_page: int) -> Dict[str, Any]:
        page, per_page = clamp_paging(page, per_page)
        return {
            "key": self.api_key,
            "q": query,
            "image_type": self.image_type,
            "safesearch": "true" if self.safe_search else "false",
            "page": page,
            "per_page": per_page,
        }


__all__ = ["DEFAULT_BASE_URL", "PixabayPhotoSearch"]
