"""
Utility helpers for simple_fetch.
"""
from .headers import (
    get_content_type,
    has_header,
    mask_headers_for_logging,
    merge_headers,
    normalize_headers,
)
from .query import (
    encode_uri_component,
    serialize_query_params,
    validate_query_params,
)
from .url import is_valid_url

__all__ = [
    "get_content_type",
    "has_header",
    "mask_headers_for_logging",
    "merge_headers",
    "normalize_headers",
    "encode_uri_component",
    "serialize_query_params",
    "validate_query_params",
    "is_valid_url",
]
