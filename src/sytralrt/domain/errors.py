"""Error hierarchy for feed loading and configuration."""


class FeedError(Exception):
    """Base exception for all feed refresh errors."""


class RetrievalError(FeedError):
    """Fetching the raw bytes of a feed failed (network, authentication, path, scheme)."""


class FormatError(FeedError):
    """A delimited record is malformed (wrong field count, bad value)."""

    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class DecodeError(FeedError):
    """A structured document is malformed or declares an unsupported charset."""


class TimeParseError(FeedError):
    """A date or hour string does not match its expected format."""


class ConfigError(FeedError, ValueError):
    """No usable feed configuration at all."""
