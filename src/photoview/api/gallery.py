import logging

from bs4 import BeautifulSoup
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import HTMLResponse

from photoview.dependencies import get_provider
from photoview.exceptions import HttpStatusError, TransportUnavailableError
from photoview.providers.flickr import FlickrProvider
from photoview.schemas.photo import Photo
from photoview.settings import GallerySettings, get_settings
from photoview.view import GalleryView

router = APIRouter(tags=["gallery"])
logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Photography</title>
</head>
<body>
<main id="photography"></main>
</body>
</html>"""


@router.get("/", response_class=HTMLResponse)
async def gallery_page(
    method: str | None = Query(None, description="Flickr API method, e.g. flickr.photos.search"),
    text: str | None = Query(None, description="Search text for flickr.photos.search"),
    photo: int | None = Query(None, ge=0, description="Index of the photo to show in the lightbox"),
    provider: FlickrProvider = Depends(get_provider),
    settings: GallerySettings = Depends(get_settings),
) -> HTMLResponse:
    document = BeautifulSoup(PAGE_TEMPLATE, "html.parser")
    view = GalleryView(document, settings.container, provider)

    photos = await view.load(method=method, text=text, cache=settings.cache)
    if photo is not None:
        view.open(provider.get_photo(photo))

    logger.info(f"Rendered gallery page with {len(photos)} photos (method={method or settings.method}, open={view.current_index})")
    return HTMLResponse(str(document))


@router.get("/api/photos", response_model=list[Photo])
async def list_photos(
    method: str | None = Query(None),
    text: str | None = Query(None),
    provider: FlickrProvider = Depends(get_provider),
    settings: GallerySettings = Depends(get_settings),
) -> list[Photo]:
    try:
        return await provider.fetch(method=method, text=text, cache=settings.cache)
    except HttpStatusError as e:
        logger.error(f"Flickr request failed: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=f"Photo service answered with status {e.status_code}") from e
    except TransportUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e)) from e


@router.get("/api/photos/{index}", response_model=Photo)
def get_photo(index: int, provider: FlickrProvider = Depends(get_provider)) -> Photo:
    photo = provider.get_photo(index)
    if photo is None:
        raise HTTPException(status_code=404, detail="Photo not found")
    return photo
