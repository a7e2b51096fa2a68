"""MVG API adapters."""

from mvg_api.adapters.mvg_api.client import MvgApiClient
from mvg_api.adapters.mvg_api.endpoints import ENDPOINTS, Endpoint

__all__ = [
    "ENDPOINTS",
    "Endpoint",
    "MvgApiClient",
]
