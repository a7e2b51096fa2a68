"""HTTP transport port."""

from typing import Protocol

from mvg_api.domain.models.http import ApiRequest, HttpResponse


class HttpTransport(Protocol):
    """Port for sending a single request to the upstream API.

    Implementations raise ``TransportError`` for connection failures,
    timeouts and non-2xx responses.
    """

    async def send(self, request: ApiRequest) -> HttpResponse:
        """Send the request and return the raw response."""
        ...
