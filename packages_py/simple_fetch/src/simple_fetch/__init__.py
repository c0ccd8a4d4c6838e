"""
Fluent async HTTP request builder on top of httpx.

Provides a chainable builder (headers, body, query params, cancellation),
per-method request functions returning typed response envelopes, and a
single error hierarchy for validation, status and transport failures.
"""
from .types import (
    ErrorLogger,
    HeadersInit,
    HttpMethod,
    QueryParams,
    SimpleResponse,
)
from .errors import (
    InvalidMethodBodyError,
    InvalidQueryParamError,
    InvalidQueryParamObjectError,
    InvalidURLError,
    RequestAbortedError,
    SimpleFetchError,
    SimpleFetchRequestError,
    TransportError,
)
from .abort import AbortController, AbortSignal
from .utils import (
    get_content_type,
    is_valid_url,
    serialize_query_params,
    validate_query_params,
)
from .methods import http_delete, http_get, http_patch, http_post, http_put
from .builder import SimpleBuilder
from .console import default_error_logger
from .factory import simple, simple_fetch

__all__ = [
    # Types
    "ErrorLogger",
    "HeadersInit",
    "HttpMethod",
    "QueryParams",
    "SimpleResponse",
    # Errors
    "InvalidMethodBodyError",
    "InvalidQueryParamError",
    "InvalidQueryParamObjectError",
    "InvalidURLError",
    "RequestAbortedError",
    "SimpleFetchError",
    "SimpleFetchRequestError",
    "TransportError",
    # Cancellation
    "AbortController",
    "AbortSignal",
    # Utilities
    "get_content_type",
    "is_valid_url",
    "serialize_query_params",
    "validate_query_params",
    # Request functions
    "http_get",
    "http_post",
    "http_put",
    "http_patch",
    "http_delete",
    # Builder
    "SimpleBuilder",
    "default_error_logger",
    # Factory
    "simple",
    "simple_fetch",
]

__version__ = "0.1.0"
