"""
Dependency injection for the photo provider

The provider (and the HTTP client inside it) is created once during
application startup and shared by every request.
"""

import logging

from photoview.providers.flickr import FlickrProvider

logger = logging.getLogger(__name__)

_provider_instance: FlickrProvider | None = None


def get_provider() -> FlickrProvider:
    """FastAPI dependency returning the shared FlickrProvider.

    Raises:
        RuntimeError: If the application lifespan has not set the provider
    """
    if _provider_instance is None:
        raise RuntimeError("Photo provider not initialized. Make sure the application lifespan is properly configured.")
    return _provider_instance


def set_provider_instance(provider: FlickrProvider | None) -> None:
    global _provider_instance
    _provider_instance = provider
    logger.info("Photo provider instance set globally" if provider is not None else "Photo provider instance cleared")
