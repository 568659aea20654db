"""Protocol for per-feed record accumulation."""

from typing import Protocol, TypeVar

R_co = TypeVar("R_co", covariant=True)


class RecordConsumerProtocol(Protocol[R_co]):
    """Accumulates parsed delimited lines into typed records."""

    def consume(self, fields: list[str], line_number: int) -> None:
        """Consume one parsed line.

        Args:
            fields: The delimited fields of the line.
            line_number: 1-based physical line number, for error reporting.
        """
        ...

    def finalize(self) -> tuple[R_co, ...]:
        """Finish accumulation and return the candidate snapshot records."""
        ...
