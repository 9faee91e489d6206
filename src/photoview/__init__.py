"""Embeddable Flickr photo gallery: provider, thumbnail grid and lightbox."""

from photoview.exceptions import HttpStatusError, PhotoViewError, TransportUnavailableError
from photoview.http_client import HttpClient
from photoview.providers.flickr import FlickrProvider
from photoview.schemas.photo import Photo
from photoview.view import GalleryView

__all__ = ["GalleryView", "FlickrProvider", "HttpClient", "Photo", "PhotoViewError", "HttpStatusError", "TransportUnavailableError"]
