"""Typed shapes of the Pixabay image-search response.

Field aliases follow the wire names (``pageURL``, ``totalHits``...); unknown
keys are ignored so API additions do not break decoding.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

# Pixabay accepts 3..200 results per page.
PER_PAGE_MIN = 3
PER_PAGE_MAX = 200


def clamp_paging(page: int, per_page: int) -> Tuple[int, int]:
    """Return the ``(page, per_page)`` pair the search API will actually serve."""
    return max(1, int(page)), min(PER_PAGE_MAX, max(PER_PAGE_MIN, int(per_page)))


class PhotoHit(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    page_url: Optional[str] = Field(default=None, alias="pageURL")
    type: Optional[str] = None
    tags: str = ""
    preview_url: Optional[str] = Field(default=None, alias="previewURL")
    preview_width: Optional[int] = Field(default=None, alias="previewWidth")
    preview_height: Optional[int] = Field(default=None, alias="previewHeight")
    webformat_url: Optional[str] = Field(default=None, alias="webformatURL")
    large_image_url: Optional[str] = Field(default=None, alias="largeImageURL")
    image_width: Optional[int] = Field(default=None, alias="imageWidth")
    image_height: Optional[int] = Field(default=None, alias="imageHeight")
    views: int = 0
    downloads: int = 0
    likes: int = 0
    comments: int = 0
    user_id: Optional[int] = None
    user: Optional[str] = None
    user_image_url: Optional[str] = Field(default=None, alias="userImageURL")

    @property
    def tag_list(self) -> List[str]:
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]


class PhotoSearchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    total: int = Field(default=0, ge=0)
    total_hits: int = Field(default=0, ge=0, alias="totalHits")
    hits: List[PhotoHit] = Field(default_factory=list)


__all__ = ["PER_PAGE_MAX", "PER_PAGE_MIN", "PhotoHit", "PhotoSearchResponse", "clamp_paging"]
