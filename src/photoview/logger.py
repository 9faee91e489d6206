import json
import logging
from datetime import UTC, datetime


class StructuredLogger:
    """Emits gallery events as JSON messages through the standard logging
    system, so they reach whatever handlers configure_logging installed.
    """

    def __init__(self, name: str = "photoview.events"):
        self._logger = logging.getLogger(name)

    def log_event(self, event: str, **kwargs) -> None:
        """Emit a structured event, e.g.

        logger.log_event("photos_fetched", method="flickr.photos.search", count=20)
        """
        payload = {"timestamp": datetime.now(UTC).isoformat(), "event": event}

        # Keys of a dict passed as `extra` are merged at top-level
        for k, v in kwargs.items():
            if k == "extra" and isinstance(v, dict):
                payload.update(v)
            else:
                payload[k] = v

        self._logger.info(json.dumps(payload, default=str))


logger = StructuredLogger()

__all__ = ["logger", "StructuredLogger"]
