"""Error types raised by the Google Maps Places client."""


class GMapsClientError(Exception):
    """Base class for every error raised by this package."""

    default_message = "Google Maps client error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidApiKey(GMapsClientError):
    default_message = "Failed to validate API KEY"


class MissingApiKey(GMapsClientError):
    default_message = "Missing API KEY, the GMAPS_API_KEY variable may not be set"


class ApiKeyLoadingFailure(GMapsClientError):
    default_message = "Failed to load the API KEY configuration"


class ClientConsumed(GMapsClientError):
    default_message = (
        "This client was already consumed by validate_api_key(); "
        "build a new one to validate again"
    )


class RequestFailure(GMapsClientError):
    """Raised when a request cannot be sent or its body cannot be decoded."""

    default_message = "Failed sending the request"

    def __init__(
        self,
        message: str | None = None,
        *,
        path: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.status_code = status_code
