"""aiohttp implementation of the HTTP transport port."""

import asyncio
import logging
from typing import TYPE_CHECKING

import aiohttp

from mvg_api.adapters.api_request_logger import log_request
from mvg_api.adapters.config import AppConfig
from mvg_api.adapters.mvg_api.constants import DEFAULT_HEADERS
from mvg_api.domain.exceptions import TransportError
from mvg_api.domain.models import ApiRequest, HttpResponse

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

logger = logging.getLogger(__name__)


class AiohttpTransport:
    """Sends requests through a caller-owned aiohttp session.

    The session is never closed here; connection pooling is the session's job.
    """

    def __init__(self, session: "ClientSession", config: AppConfig | None = None) -> None:
        """Initialize with an aiohttp session and optional configuration."""
        self._session = session
        self._config = config or AppConfig()

    def _headers(self) -> dict[str, str]:
        return {**DEFAULT_HEADERS, "user-agent": self._config.user_agent}

    async def _read_response(self, response: "ClientResponse", url: str) -> HttpResponse:
        """Read the body, raising for non-2xx statuses."""
        body = await response.read()
        if not 200 <= response.status < 300:
            error_body = body[:200].decode("utf-8", errors="replace") or "(empty response body)"
            logger.warning(f"MVG API returned status {response.status} for {url}: {error_body}")
            raise TransportError(
                f"MVG API returned status {response.status} for {url}",
                url=url,
                status=response.status,
            )
        return HttpResponse(status=response.status, body=body)

    async def send(self, request: ApiRequest) -> HttpResponse:
        """Send a single request. Raises TransportError on any network failure."""
        headers = self._headers()
        log_request(request, headers, enabled=self._config.log_requests)
        timeout = aiohttp.ClientTimeout(total=self._config.request_timeout_seconds)

        try:
            async with self._session.request(
                request.method,
                request.url,
                params=request.params or None,
                headers=headers,
                timeout=timeout,
                ssl=self._config.verify_ssl,
            ) as response:
                return await self._read_response(response, request.url)
        except aiohttp.ClientError as e:
            raise TransportError(
                f"Request to {request.url} failed: {e}", url=request.url
            ) from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request to {request.url} timed out", url=request.url) from e
        except ValueError as e:
            # yarl refuses non-finite floats and other unencodable query values
            raise TransportError(
                f"Cannot build request to {request.url}: {e}", url=request.url
            ) from e
