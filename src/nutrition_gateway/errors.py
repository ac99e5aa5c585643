"""Error taxonomy surfaced to API callers as ``{"error": message}``."""

from http import HTTPStatus


class GatewayError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(GatewayError):
    """Caller input is missing or malformed."""

    status_code = HTTPStatus.BAD_REQUEST


class NotFoundError(GatewayError):
    """Upstream search returned no results."""

    status_code = HTTPStatus.NOT_FOUND


class MethodNotAllowedError(GatewayError):
    """Endpoint was called with an unsupported HTTP method."""

    status_code = HTTPStatus.METHOD_NOT_ALLOWED

    def __init__(self, message: str = "Method not allowed") -> None:
        super().__init__(message)


class ConfigurationError(GatewayError):
    """Required credentials are not configured."""

    def __init__(self, message: str = "Backend API keys not configured") -> None:
        super().__init__(message)


class UpstreamError(GatewayError):
    """A third-party API returned an error or could not be reached."""
