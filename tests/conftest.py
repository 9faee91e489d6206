import httpx
import pytest
from bs4 import BeautifulSoup

from photoview.http_client import HttpClient
from photoview.providers.flickr import FlickrProvider
from photoview.view import GalleryView
from tests.helpers import PAGE_HTML, FakeFlickrApi


@pytest.fixture
def fake_api() -> FakeFlickrApi:
    return FakeFlickrApi()


@pytest.fixture
def http_client(fake_api: FakeFlickrApi) -> HttpClient:
    return HttpClient(httpx.AsyncClient(transport=httpx.MockTransport(fake_api.handler)))


@pytest.fixture
def provider(http_client: HttpClient) -> FlickrProvider:
    return FlickrProvider(http_client, api_key="test-key", per_page=5)


@pytest.fixture
def document() -> BeautifulSoup:
    return BeautifulSoup(PAGE_HTML, "html.parser")


@pytest.fixture
def view(document: BeautifulSoup, provider: FlickrProvider) -> GalleryView:
    return GalleryView(document, "#photography", provider)
