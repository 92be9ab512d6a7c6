class FetchError(Exception):
    """Base exception for failures while fetching transfers from the graph API."""


class TransportError(FetchError):
    """Raised when the request fails, times out or gets an HTTP error status."""


class DecodeError(FetchError):
    """Raised when the response is not JSON or not a list of transfers."""
