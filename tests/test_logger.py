import json
import logging

from photoview.logger import StructuredLogger


def test_log_event_emits_json(caplog):
    event_logger = StructuredLogger("tests.events")

    with caplog.at_level(logging.INFO, logger="tests.events"):
        event_logger.log_event("photos_fetched", method="flickr.photos.search", count=3, extra={"container": "photography"})

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["event"] == "photos_fetched"
    assert payload["method"] == "flickr.photos.search"
    assert payload["count"] == 3
    assert payload["container"] == "photography"
    assert "extra" not in payload
    assert "timestamp" in payload


def test_log_event_serializes_unknown_types(caplog):
    event_logger = StructuredLogger("tests.events")

    with caplog.at_level(logging.INFO, logger="tests.events"):
        event_logger.log_event("photo_opened", photo=object())

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["photo"].startswith("<object object")
