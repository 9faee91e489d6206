from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GallerySettings(BaseSettings):
    """Configuration for the Flickr provider and the gallery page"""

    api_key: str = ""
    per_page: int = Field(default=20, ge=1, le=500)  # Flickr caps a page at 500
    method: str = "flickr.photos.getRecent"
    container: str = "#photography"
    cache: bool = True  # False appends a cache-busting parameter to every API call
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="FLICKR_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> GallerySettings:
    return GallerySettings()


__all__ = ["GallerySettings", "get_settings"]
