"""
Entry points for simple_fetch.
"""
from typing import Any, Optional

import httpx

from .builder import SimpleBuilder
from .errors import InvalidURLError
from .methods.get import http_get
from .types import HeadersInit
from .utils.url import is_valid_url


def simple(url: str, default_headers: Optional[HeadersInit] = None, **kwargs: Any) -> SimpleBuilder:
    """
    Create a SimpleBuilder for url.

    Keyword arguments are forwarded to SimpleBuilder (logger,
    use_abort_controller, client).

    Raises:
        InvalidURLError: url is not an absolute URL.

    Example:
        response = await simple("https://api.example.com/items").body({"name": "x"}).post()
    """
    if not is_valid_url(url):
        raise InvalidURLError(url)
    return SimpleBuilder(url, default_headers, **kwargs)


async def simple_fetch(
    url: str,
    headers: Optional[HeadersInit] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[Any]:
    """GET url and return only the parsed data, or None when there is none."""
    response = await http_get(url, headers, client=client)
    return response.data
