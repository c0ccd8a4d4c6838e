"""
Header helpers.

Headers arrive as a plain mapping, a list of (key, value) pairs or an
httpx.Headers collection. Internally they are kept as an ordered
Dict[str, str]; the helpers here convert at that boundary.
"""
from typing import Any, Dict, Mapping, Optional

import httpx

from ..types import HeaderDict

_MASKED_HEADERS = {"authorization", "x-api-key"}


def _as_text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return str(value)


def get_content_type(headers: Any) -> str:
    """
    Retrieve the Content-Type value from any supported header representation.

    Lookup is case-insensitive. Returns an empty string when the header is
    absent or the input is not a recognised header shape.
    """
    if headers is None:
        return ""

    if isinstance(headers, httpx.Headers):
        return headers.get("content-type", "")

    if isinstance(headers, Mapping):
        for key, value in headers.items():
            if _as_text(key).lower() == "content-type":
                return _as_text(value)
        return ""

    if isinstance(headers, (list, tuple)):
        for pair in headers:
            if isinstance(pair, (list, tuple)) and len(pair) == 2:
                if _as_text(pair[0]).lower() == "content-type":
                    return _as_text(pair[1])
        return ""

    # Opaque collection exposing a case-insensitive getter
    getter = getattr(headers, "get", None)
    if callable(getter):
        value = getter("Content-Type")
        return _as_text(value) if value else ""

    return ""


def normalize_headers(headers: Any) -> HeaderDict:
    """Convert any supported header representation into an ordered dict."""
    if headers is None:
        return {}

    if isinstance(headers, httpx.Headers):
        return {key: value for key, value in headers.items()}

    if isinstance(headers, Mapping):
        return {_as_text(key): _as_text(value) for key, value in headers.items()}

    if isinstance(headers, (list, tuple)):
        result: Dict[str, str] = {}
        for pair in headers:
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise TypeError(f"Header pairs must be (key, value), got: {pair!r}")
            result[_as_text(pair[0])] = _as_text(pair[1])
        return result

    raise TypeError(f"Unsupported headers type: {type(headers).__name__}")


def find_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Return the actual key matching name case-insensitively, if any."""
    lowered = name.lower()
    for key in headers:
        if key.lower() == lowered:
            return key
    return None


def has_header(headers: Mapping[str, str], name: str) -> bool:
    """Case-insensitive presence check."""
    return find_header(headers, name) is not None


def merge_headers(base: Mapping[str, str], extra: Any) -> HeaderDict:
    """
    Shallow-merge extra onto base; extra wins.

    An existing key matching an incoming key case-insensitively is replaced
    so the result never holds two spellings of the same header.
    """
    result = dict(base)
    for key, value in normalize_headers(extra).items():
        existing = find_header(result, key)
        if existing is not None:
            del result[existing]
        result[key] = value
    return result


def mask_headers_for_logging(headers: Mapping[str, str]) -> HeaderDict:
    """Mask credential headers for safe logging."""
    masked = dict(headers)
    for key, value in masked.items():
        if key.lower() in _MASKED_HEADERS:
            masked[key] = value[:4] + "***" if len(value) > 4 else "***"
    return masked
