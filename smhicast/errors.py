"""Error types raised by the forecast pipeline."""


class ForecastError(Exception):
    """Base class for failures that abort a forecast run."""


class NetworkError(ForecastError):
    """Raised when the forecast request fails at the transport layer."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class ParseError(ForecastError):
    """Raised when the response body is not well-formed JSON."""


class SchemaError(ForecastError):
    """Raised when the parsed document does not have the expected shape."""
