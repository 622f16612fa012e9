"""Use case for free-text photo search."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from pixsearch.domain.messages import ValidationMessages
from pixsearch.domain.models import PhotoHit, clamp_paging
from pixsearch.domain.outcome import Failure, NetworkError
from pixsearch.domain.ports import PhotoSearchPort, UseCaseError
from pixsearch.usecases.error_mapping import map_network_error

_log = logging.getLogger(__name__)


@dataclass
class SearchPhotosResult:
    """Hits of one result page plus the totals reported by the API."""

    query: str
    page: int
    per_page: int
    hits: List[PhotoHit] = field(default_factory=list)
    total: int = 0
    total_hits: int = 0

    @property
    def has_more(self) -> bool:
        return self.page * self.per_page < self.total_hits


@dataclass
class SearchPhotos:
    """Use-case callable validating input and running one search page.

    Connectivity warnings are forwarded to ``on_warning`` when given; the
    search itself still runs.
    """

    search_port: PhotoSearchPort
    on_warning: Optional[Callable[[str], None]] = None

    def __call__(self, query: str, *, page: int = 1, per_page: int = 20) -> SearchPhotosResult:
        text = (query or "").strip()
        if not text:
            raise UseCaseError("SEARCH_INPUT_REQUIRED", ValidationMessages.IMAGE_INPUT)
        page, per_page = clamp_paging(page, per_page)

        outcome = self.search_port.search(
            text, page=page, per_page=per_page, on_warning=self._warn
        )
        if isinstance(outcome, Failure):
            _log.info("Photo search for %r failed: %s", text, outcome.error)
            raise map_network_error(outcome.error)

        response = outcome.value
        return SearchPhotosResult(
            query=text,
            page=page,
            per_page=per_page,
            hits=list(response.hits),
            total=response.total,
            total_hits=response.total_hits,
        )

    def _warn(self, error: NetworkError) -> None:
        if self.on_warning is not None:
            self.on_warning(error.message)


__all__ = ["SearchPhotos", "SearchPhotosResult"]
