import json
from typing import Any

import httpx

PAGE_HTML = '<!DOCTYPE html><html><head><title>Test</title></head><body><div id="photography"></div></body></html>'


def make_entry(n: int, title: str | None = None) -> dict[str, Any]:
    """A raw entry shaped like the ones flickr.photos.search returns."""
    return {
        "id": str(5000 + n),
        "owner": "12345678@N00",
        "secret": f"abc{n}",
        "server": str(65000 + n),
        "farm": 66,
        "title": title if title is not None else f"Photo {n}",
        "ispublic": 1,
        "isfriend": 0,
        "isfamily": 0,
    }


def flickr_payload(*entries: dict[str, Any]) -> dict[str, Any]:
    return {
        "photos": {"page": 1, "pages": 1, "perpage": len(entries), "total": len(entries), "photo": list(entries)},
        "stat": "ok",
    }


class FakeFlickrApi:
    """Stand-in for api.flickr.com that records every request it receives."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = json.dumps(flickr_payload())

    def respond_with(self, payload: Any = None, status_code: int = 200, text: str | None = None) -> None:
        self.status_code = status_code
        self.body = text if text is not None else json.dumps(payload)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)
