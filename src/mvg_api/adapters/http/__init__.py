"""HTTP transport adapters."""

from mvg_api.adapters.http.aiohttp_transport import AiohttpTransport

__all__ = ["AiohttpTransport"]
