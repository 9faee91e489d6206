# Providers package

from .flickr import FlickrProvider

__all__ = ["FlickrProvider"]
