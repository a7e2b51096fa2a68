"""Exceptions raised by the MVG API client."""


class MvgApiError(Exception):
    """Base exception for MVG API errors."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class TransportError(MvgApiError):
    """Raised when the network exchange fails or upstream answers with a non-2xx status."""

    def __init__(self, message: str, url: str | None = None, status: int | None = None) -> None:
        super().__init__(message, url)
        self.status = status


class DecodeError(MvgApiError):
    """Raised when a response body does not match the expected shape.

    ``path`` names the offending location in the payload, ``"<root>"`` for the
    top-level document. ``fragment`` holds the start of the raw body.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        path: str | None = None,
        fragment: str | None = None,
    ) -> None:
        super().__init__(message, url)
        self.path = path
        self.fragment = fragment
