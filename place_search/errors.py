# place_search/errors.py


class PlaceSearchError(Exception):
    """Base class for HTTP-level failures of a Places request."""


class InvalidResponse(PlaceSearchError):
    def __init__(self, received: object = None):
        self.received = received
        super().__init__(f"Transport did not return an HTTP response (got {type(received).__name__})")


class ServerError(PlaceSearchError):
    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body[:200]
        super().__init__(f"Places API returned HTTP {status_code}")


class DecodingError(ValueError):
    """Body is not JSON, or does not have the expected shape. Not a PlaceSearchError."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)
