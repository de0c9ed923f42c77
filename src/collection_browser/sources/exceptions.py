"""Exceptions for collection source adapters.

Each error kind carries one fixed, user-displayable message.
"""


class CollectionError(Exception):
    """Base exception for all collection source errors."""

    message = "An unexpected error occurred. Please try again."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidURLError(CollectionError):
    """The request URL could not be constructed."""

    message = "Invalid request. Please try again later"


class NetworkError(CollectionError):
    """General network failure, unexpected status or unreadable body."""

    message = "Something went wrong with the network. Please try again."


class NoInternetConnectionError(CollectionError):
    """No route to the service (offline, DNS failure, refused connection)."""

    message = "No internet connection. Please check your connection and try again."


class ServerError(CollectionError):
    """The service answered with a 5xx status."""

    message = "The server is having problems. Please try again later."


class TooManyRequestsError(CollectionError):
    """The service answered with HTTP 429."""

    message = "Too many requests. Please wait a moment and try again."


class NoDataError(CollectionError):
    """The service answered 200 with no artworks."""

    message = "No artworks found. Try a different search."
