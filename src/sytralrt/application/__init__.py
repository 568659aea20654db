"""Application layer - use cases orchestrating domain contracts."""

from sytralrt.application.services import FeedRefreshService

__all__ = ["FeedRefreshService"]
