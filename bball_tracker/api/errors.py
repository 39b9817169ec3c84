"""API errors raised by the game API clients."""

from typing import Optional

import requests

# Statuses worth another attempt; everything else 4xx/5xx is final
RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})


class ApiError(Exception):
    """Raised when a request to the game API fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def is_transient(self) -> bool:
        """True for failures another attempt may fix (no response, or a retryable status)."""
        return self.status_code is None or self.status_code in RETRYABLE_STATUS_CODES


class NotFoundError(ApiError):
    """Raised on 404 responses."""


class ForbiddenError(ApiError):
    """Raised on 401/403 responses."""


def error_from_response(response: requests.Response, fallback: str = "Request failed") -> ApiError:
    """
    Build the ApiError for a failed response.

    The server reports failures as {"error": "<message>"}; non-JSON bodies fall
    back to the HTTP reason.
    """
    try:
        body = response.json()
        message = body.get('error') if isinstance(body, dict) else None
    except ValueError:
        message = None
    message = message or response.reason or fallback

    status = response.status_code
    if status == 404:
        return NotFoundError(message, status)
    if status in (401, 403):
        return ForbiddenError(message, status)
    return ApiError(message, status)


def is_transient_error(exc: Exception) -> bool:
    """Retry predicate: connection problems, timeouts and retryable statuses."""
    if isinstance(exc, ApiError):
        return exc.is_transient
    return isinstance(exc, (requests.ConnectionError, requests.Timeout))
