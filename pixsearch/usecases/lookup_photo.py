"""Async use case fetching a single photo by its Pixabay id."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pixsearch.domain.models import PhotoHit, PhotoSearchResponse
from pixsearch.domain.ports import AsyncJsonPort, UseCaseError
from pixsearch.usecases.error_mapping import map_data_error


@dataclass
class LookupPhoto:
    json_port: AsyncJsonPort
    base_url: str
    api_key: str

    async def __call__(self, photo_id: int) -> PhotoHit:
        if int(photo_id) <= 0:
            raise UseCaseError("INVALID_PHOTO_ID", f"Invalid photo id: {photo_id}")

        url = _with_query(self.base_url, {"key": self.api_key, "id": int(photo_id)})
        try:
            response = await self.json_port.request(url, PhotoSearchResponse)
        except Exception as exc:
            raise map_data_error(
                exc,
                default_code="PHOTO_LOOKUP_FAILED",
                default_message="Failed to load photo details.",
            ) from exc

        if not response.hits:
            raise UseCaseError("PHOTO_NOT_FOUND", f"Photo {photo_id} was not found.")
        return response.hits[0]


def _with_query(base_url: str, params: dict) -> str:
    """Merge ``params`` into whatever query ``base_url`` already carries."""
    parts = urlsplit(base_url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k not in params]
    query.extend(params.items())
    return urlunsplit(parts._replace(query=urlencode(query)))


__all__ = ["LookupPhoto"]
