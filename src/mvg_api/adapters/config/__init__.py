"""Configuration adapters."""

from mvg_api.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
