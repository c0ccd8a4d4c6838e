"""
Query parameter validation and serialization.
"""
import logging
import math
from typing import Any, List, Mapping
from urllib.parse import quote

from ..errors import InvalidQueryParamError, InvalidQueryParamObjectError
from ..types import QueryParams

logger = logging.getLogger("simple_fetch.query")

# Characters encodeURIComponent leaves untouched, on top of quote()'s always-safe set
_URI_COMPONENT_SAFE = "!*'()"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, str) or _is_number(value)


def _is_valid_value(value: Any) -> bool:
    if _is_scalar(value):
        return True
    if isinstance(value, (list, tuple)):
        return all(_is_scalar(item) for item in value)
    return False


def _stringify(value: Any) -> str:
    """Render a scalar the way a JavaScript runtime would (1.0 -> "1")."""
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def encode_uri_component(value: str) -> str:
    """Percent-encode a string like JavaScript's encodeURIComponent."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def validate_query_params(params: Any) -> None:
    """
    Validate that params is a plain mapping of str -> string | number | list.

    Raises:
        InvalidQueryParamObjectError: params is not a mapping.
        InvalidQueryParamError: first value (in iteration order) with an
            unsupported type; None, booleans and nested mappings included.
    """
    if not isinstance(params, Mapping):
        raise InvalidQueryParamObjectError(params)

    for key, value in params.items():
        if not _is_valid_value(value):
            raise InvalidQueryParamError(str(key), value)


def serialize_query_params(params: QueryParams, lower_case_keys: bool = False) -> str:
    """
    Serialize query parameters into a query string.

    Pairs keep the mapping's insertion order. List values become repeated
    key=value pairs in list order (ids=1&ids=2). With lower_case_keys, keys
    are lower-cased before encoding.

    Example:
        serialize_query_params({"page": 1, "limit": 10})  # "page=1&limit=10"
    """
    validate_query_params(params)

    pairs: List[str] = []
    for key, value in params.items():
        final_key = str(key).lower() if lower_case_keys else str(key)
        encoded_key = encode_uri_component(final_key)
        items = value if isinstance(value, (list, tuple)) else [value]
        for item in items:
            pairs.append(f"{encoded_key}={encode_uri_component(_stringify(item))}")

    query = "&".join(pairs)
    logger.debug(f"serialize_query_params: {len(pairs)} pair(s) -> {query!r}")
    return query
