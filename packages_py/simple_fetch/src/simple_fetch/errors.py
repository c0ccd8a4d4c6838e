"""
Error types raised by simple_fetch.

Validation errors (URL, query params, method/body conflict) are raised before
any network activity. Request errors carry the failed response details.
Everything else a request can fail with is normalized to TransportError.
"""
import reprlib
from typing import Any, Optional

from .config import UNKNOWN_ERROR_MESSAGE

_preview = reprlib.Repr()
_preview.maxstring = 40
_preview.maxother = 40


def preview_value(value: Any) -> str:
    """Short printable preview of a value for error messages."""
    return _preview.repr(value)


class SimpleFetchError(Exception):
    """Base class for all simple_fetch errors."""


class InvalidURLError(SimpleFetchError, ValueError):
    """Raised when a URL fails absolute-URL validation."""

    def __init__(self, url: Any):
        super().__init__(
            f"A valid URL is required, received: {url}. "
            f'Ensure the URL starts with "http://" or "https://".'
        )
        self.url = url


class InvalidMethodBodyError(SimpleFetchError, ValueError):
    """Raised when a body is configured for a method that forbids one."""

    def __init__(self, method: str, url: str):
        super().__init__(
            f"{method} requests should not have a body. Request made to: {url}"
        )
        self.method = method
        self.url = url


class InvalidQueryParamObjectError(SimpleFetchError, TypeError):
    """Raised when query parameters are not a plain mapping."""

    def __init__(self, params: Any):
        super().__init__(
            f"Query parameters must be a plain object, received: "
            f"{preview_value(params)}."
        )
        self.params = params


class InvalidQueryParamError(SimpleFetchError, TypeError):
    """Raised when a query parameter value is not a string, number or list of those."""

    def __init__(self, key: str, value: Any):
        super().__init__(
            f'Invalid query parameter value for key "{key}": {preview_value(value)}. '
            f"Only strings, numbers, or arrays of these are allowed."
        )
        self.key = key
        self.value = value


class SimpleFetchRequestError(SimpleFetchError):
    """
    Raised when the server answers with a non-success status.

    Carries the HTTP method, URL, status code, status text and the response
    body text (best effort) so callers can recover from specific statuses.
    """

    def __init__(
        self,
        method: str,
        url: str,
        status: Optional[int] = None,
        status_text: Optional[str] = None,
        response_body: Optional[str] = None,
    ):
        status_label = status if status is not None else "unknown"
        super().__init__(
            f"{method} request to {url} failed with status {status_label}: "
            f"{status_text or 'No status text'}"
        )
        self.method = method
        self.url = url
        self.status = status
        self.status_text = status_text
        self.response_body = response_body


class TransportError(SimpleFetchError):
    """Network, abort, decoding or any other non-status failure."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or UNKNOWN_ERROR_MESSAGE)


class RequestAbortedError(SimpleFetchError):
    """Raised when an AbortSignal fires before the transport call completes."""

    def __init__(self, reason: Any = None):
        super().__init__("This operation was aborted")
        self.reason = reason
