import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from photoview.api.gallery import router as gallery_router
from photoview.dependencies import set_provider_instance
from photoview.http_client import HttpClient
from photoview.logging_config import configure_logging
from photoview.providers.flickr import FlickrProvider
from photoview.settings import get_settings

# uvicorn imports this module when starting the app, so logging is set up
# before its own loggers start emitting
configure_logging(level=get_settings().log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the shared HTTP client and Flickr provider, close them on shutdown."""
    settings = get_settings()
    logger.info("Starting up application...")
    if not settings.api_key:
        logger.warning("FLICKR_API_KEY is not set, Flickr will reject every request")

    http = HttpClient()
    set_provider_instance(FlickrProvider(http, api_key=settings.api_key, per_page=settings.per_page, method=settings.method))

    yield

    logger.info("Shutting down application...")
    set_provider_instance(None)
    await http.close()


app = FastAPI(redoc_url=None, lifespan=lifespan)
app.include_router(gallery_router)


def run() -> None:
    uvicorn.run("photoview.main:app", host="127.0.0.1", port=8000, log_config=None)
