class PhotoViewError(Exception):
    """Base class for errors raised by photoview."""


class TransportUnavailableError(PhotoViewError):
    """Raised before any request is sent when the HTTP client cannot be used."""


class HttpStatusError(PhotoViewError):
    """A request finished with a non-success status.

    ``status_code`` is 0 when the connection itself failed.
    """

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP {status_code} {reason}".strip())
