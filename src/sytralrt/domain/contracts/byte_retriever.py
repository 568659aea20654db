"""Protocol for fetching raw feed bytes."""

from typing import Protocol

from sytralrt.domain.models.source import SourceLocation


class ByteRetrieverProtocol(Protocol):
    """Fetches the complete content of a feed source."""

    def retrieve(self, location: SourceLocation, timeout: float | None = None) -> bytes:
        """Return the complete content at location.

        Args:
            location: The source location.
            timeout: Upper bound in seconds for each blocking network step.

        Raises:
            RetrievalError: If the content cannot be fetched.
        """
        ...
