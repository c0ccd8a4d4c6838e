"""
URL validation.
"""
from typing import Any
from urllib.parse import urlsplit


def is_valid_url(url: Any) -> bool:
    """
    Return True if url parses as an absolute URL with scheme and host.

    Leading and trailing whitespace is ignored. Whitespace inside the path,
    query or fragment is accepted, since it is percent-encoded on the wire.
    """
    if not isinstance(url, str):
        return False

    url = url.strip()
    if not url:
        return False

    try:
        parsed = urlsplit(url)
        # Accessing port raises ValueError for non-numeric or out-of-range ports
        parsed.port
    except ValueError:
        return False

    if any(ch.isspace() for ch in parsed.scheme + parsed.netloc):
        return False

    return bool(parsed.scheme) and bool(parsed.hostname)
