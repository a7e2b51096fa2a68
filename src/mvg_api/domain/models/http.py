"""Request/response values exchanged with the HTTP transport."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ApiRequest:
    """A single outgoing request against the MVG API."""

    method: str
    url: str
    params: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HttpResponse:
    """Raw status and body returned by the transport."""

    status: int
    body: bytes
