"""Ports (interfaces) for the ports-and-adapters architecture."""

from mvg_api.domain.ports.http_transport import HttpTransport

__all__ = ["HttpTransport"]
