from pydantic import BaseModel, ConfigDict, Field


class Photo(BaseModel):
    """Normalized photo record owned by a provider."""

    index: int = Field(..., ge=0)
    id: str
    title: str
    small_url: str
    large_url: str

    model_config = ConfigDict(frozen=True)


class FlickrPhotoEntry(BaseModel):
    """One raw entry of a Flickr ``photos.photo`` array."""

    id: str
    title: str = ""
    farm: int
    server: str
    secret: str

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


class FlickrPhotos(BaseModel):
    photo: list[FlickrPhotoEntry]


class FlickrSearchResponse(BaseModel):
    """Envelope returned by flickr.photos.search / flickr.photos.getRecent"""

    photos: FlickrPhotos
    stat: str | None = None
