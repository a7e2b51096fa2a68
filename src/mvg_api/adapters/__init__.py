"""Adapters layer - external system integrations."""

from mvg_api.adapters.config import AppConfig
from mvg_api.adapters.http import AiohttpTransport
from mvg_api.adapters.mvg_api import MvgApiClient

__all__ = [
    "AiohttpTransport",
    "AppConfig",
    "MvgApiClient",
]
