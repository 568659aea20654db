"""Protocol for per-feed refresh loops."""

from typing import Protocol

from sytralrt.domain.models.feed import Feed


class FeedRefresherProtocol(Protocol):
    """Refreshes one feed once or periodically."""

    feed: Feed

    async def refresh(self) -> bool:
        """Run one refresh cycle, returning whether it succeeded."""
        ...

    async def start(self) -> None:
        """Start the background refresh loop."""
        ...

    async def stop(self) -> None:
        """Stop the background refresh loop."""
        ...
