"""Opt-in logging of outgoing MVG API requests.

Enabled by ``MVG_API_LOG_REQUESTS=true`` or ``AppConfig.log_requests``.
"""

import json
import logging
import os

from mvg_api.domain.models import ApiRequest

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "MVG_API_LOG_REQUESTS"
REDACTED = "***REDACTED***"
_SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def request_logging_enabled() -> bool:
    return os.getenv(LOG_REQUESTS_ENV, "").lower() == "true"


def describe_request(request: ApiRequest) -> str:
    """Render a request as ``METHOD url?key=value`` with params in sorted order."""
    if not request.params:
        return f"{request.method} {request.url}"
    query = "&".join(f"{key}={value}" for key, value in sorted(request.params.items()))
    separator = "&" if "?" in request.url else "?"
    return f"{request.method} {request.url}{separator}{query}"


def masked_headers(headers: dict[str, str]) -> dict[str, str]:
    return {
        name: REDACTED if name.lower() in _SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def log_request(
    request: ApiRequest, headers: dict[str, str] | None = None, enabled: bool = False
) -> None:
    """Log ``request`` at INFO when ``enabled`` or the environment switch is on."""
    if not (enabled or request_logging_enabled()):
        return

    message = describe_request(request)
    if headers:
        message += f"\nHeaders: {json.dumps(masked_headers(headers), sort_keys=True)}"
    logger.info(message)
