"""Feed refresh loops."""

from sytralrt.adapters.refresh.factory import build_feed_refreshers
from sytralrt.adapters.refresh.feed_refresher import (
    FeedRefresher,
    FeedRefresherServices,
    RefreshPolicy,
)

__all__ = ["FeedRefresher", "FeedRefresherServices", "RefreshPolicy", "build_feed_refreshers"]
