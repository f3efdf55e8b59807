"""Exception taxonomy for the ElevenLabs API client."""


class XiLabsError(Exception):
    """Base error raised by the client."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class APIError(XiLabsError):
    """Unexpected status from the API (5xx other than 503, or anything unmapped)."""

    pass


class ValidationError(XiLabsError):
    """Client error (4xx) without a more specific class."""

    pass


class BadRequestError(XiLabsError):
    """HTTP 400."""

    pass


class AuthenticationError(XiLabsError):
    """HTTP 401: missing or invalid API key."""

    pass


class PaymentRequiredError(XiLabsError):
    """HTTP 402."""

    pass


class ForbiddenError(XiLabsError):
    """HTTP 403."""

    pass


class NotFoundError(XiLabsError):
    """HTTP 404."""

    pass


class RequestTimeoutError(XiLabsError):
    """HTTP 408."""

    pass


class UnprocessableEntityError(XiLabsError):
    """HTTP 422."""

    pass


class RateLimitError(XiLabsError):
    """HTTP 429."""

    pass


class ServiceUnavailableError(XiLabsError):
    """HTTP 503."""

    pass


class TransportError(XiLabsError):
    """Network-level failure before a status code was received."""

    pass


class WebSocketError(XiLabsError):
    """Error reported on the real-time text-to-speech socket."""

    pass


class ConfigurationError(XiLabsError, ValueError):
    """Client configuration is missing or invalid."""

    pass


# (exception class, message used when the response body is empty)
_STATUS_ERRORS: dict[int, tuple[type[XiLabsError], str]] = {
    400: (BadRequestError, "Bad request - invalid parameters"),
    401: (AuthenticationError, "Invalid API key or authentication failed"),
    402: (PaymentRequiredError, "Payment required"),
    403: (ForbiddenError, "Access forbidden"),
    404: (NotFoundError, "Resource not found"),
    408: (RequestTimeoutError, "Request timeout"),
    422: (UnprocessableEntityError, "Unprocessable entity - invalid data"),
    429: (RateLimitError, "Rate limit exceeded"),
    503: (ServiceUnavailableError, "Service unavailable"),
}


def error_for_status(status_code: int) -> tuple[type[XiLabsError], str]:
    """Map a non-2xx status code to its exception class and default message.

    Args:
        status_code: HTTP status code of the failed response.

    Returns:
        Tuple of (exception class, default message for an empty body).
    """
    if status_code in _STATUS_ERRORS:
        return _STATUS_ERRORS[status_code]
    if 400 <= status_code < 500:
        return ValidationError, f"Client error occurred with status {status_code}"
    return APIError, f"API request failed with status {status_code}"
