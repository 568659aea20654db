"""Configuration adapters."""

from sytralrt.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
