"""
Flickr photo provider

Builds Flickr REST URLs, fetches them through HttpClient and keeps the
normalized photo list of the most recent successful fetch.
"""

import logging
from typing import Any, Literal
from urllib.parse import quote

from pydantic import ValidationError

from photoview.http_client import HttpClient
from photoview.logger import logger as event_logger
from photoview.patterns import apply_patterns, parse_patterns
from photoview.schemas.photo import FlickrPhotoEntry, FlickrSearchResponse, Photo

logger = logging.getLogger(__name__)

SEARCH_METHOD = "flickr.photos.search"
RECENT_METHOD = "flickr.photos.getRecent"

API_URL_PATTERN = "https://api.flickr.com/services/rest/?method={method}&api_key={api_key}"
API_METHOD_PATTERNS = {
    SEARCH_METHOD: "&text={text}",
    RECENT_METHOD: "",
}
API_COMMON_PATTERN = "&per_page={per_page}&format=json&nojsoncallback=1"
API_URL_PARAMS: dict[str, Any] = {
    "api_key": "",
    "method": RECENT_METHOD,
    "per_page": 20,
}

PHOTO_URL_PATTERN = "https://farm{farm}.staticflickr.com/{server}/{id}_{secret}"
PHOTO_URL_SUFFIXES = {
    "small": "_q.jpg",  # 150x150 square
    "large": "_z.jpg",  # 640 on the longest side
}

PhotoSize = Literal["small", "large"]


class FlickrProvider:
    """Flickr photo service

    Args:
        http: Client used for the API calls
        api_key: The Flickr API key
        per_page: Number of photos to fetch
        **params: Any other URL parameter (method, text, ...)
    """

    def __init__(self, http: HttpClient, api_key: str | None = None, per_page: int | None = None, **params: Any):
        self.http = http
        overrides = {"api_key": api_key, "per_page": per_page, **params}
        # Caller values take precedence over the defaults
        self.params = {**API_URL_PARAMS, **{k: v for k, v in overrides.items() if v is not None}}
        self._photos: list[Photo] = []

    def build_url(self, **params: Any) -> str:
        """Build the API URL for one request from the provider params and ``params``."""
        merged = {**self.params, **{k: v for k, v in params.items() if v is not None}}
        pattern = API_URL_PATTERN + API_METHOD_PATTERNS.get(merged["method"], "") + API_COMMON_PATTERN
        return apply_patterns(pattern, {k: quote(str(v), safe="") for k, v in merged.items()})

    async def fetch(self, method: str | None = None, text: str | None = None, per_page: int | None = None, cache: bool = True) -> list[Photo]:
        """Fetch one page of photos and store the normalized result.

        Returns:
            The stored photo list. A payload of unexpected shape leaves the
            previous list in place.

        Raises:
            HttpStatusError: If the API answered with a non-success status
            TransportUnavailableError: If the HTTP client is closed
        """
        url = self.build_url(method=method, text=text, per_page=per_page)
        body = await self.http.get(url, cache=cache)

        try:
            data = FlickrSearchResponse.model_validate_json(body)
        except ValidationError as e:
            event_logger.log_event("photos_payload_ignored", method=method or self.params["method"], errors=e.error_count())
            logger.warning(f"Ignoring unexpected Flickr payload: {e.error_count()} validation errors")
            return self.get_photos()

        self._set_photos(data.photos.photo)
        event_logger.log_event("photos_fetched", method=method or self.params["method"], count=len(self._photos))
        return self.get_photos()

    def photo_url(self, entry: FlickrPhotoEntry, size: PhotoSize) -> str:
        return apply_patterns(PHOTO_URL_PATTERN, entry.model_dump()) + PHOTO_URL_SUFFIXES[size]

    def parse_photo_url(self, url: str) -> dict[str, str] | None:
        """Return the farm/server/id/secret fields an image URL was built from."""
        for suffix in PHOTO_URL_SUFFIXES.values():
            if url.endswith(suffix):
                return parse_patterns(PHOTO_URL_PATTERN + suffix, url)
        return None

    def _set_photos(self, entries: list[FlickrPhotoEntry]) -> None:
        self._photos = [
            Photo(
                index=i,
                id=entry.id,
                title=entry.title,
                small_url=self.photo_url(entry, "small"),
                large_url=self.photo_url(entry, "large"),
            )
            for i, entry in enumerate(entries)
        ]

    def get_photos(self) -> list[Photo]:
        return list(self._photos)

    def get_photo(self, index: int) -> Photo | None:
        if 0 <= index < len(self._photos):
            return self._photos[index]
        return None


__all__ = ["FlickrProvider", "SEARCH_METHOD", "RECENT_METHOD"]
