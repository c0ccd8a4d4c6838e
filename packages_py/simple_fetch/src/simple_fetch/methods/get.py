"""
GET request function.
"""
from typing import Any, Optional

import httpx

from ..abort import AbortSignal
from ..types import HeadersInit, SimpleResponse
from .base import send_request


async def http_get(
    url: str,
    headers: Optional[HeadersInit] = None,
    signal: Optional[AbortSignal] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> SimpleResponse[Any]:
    """Perform a GET request and return the parsed response envelope."""
    return await send_request("GET", url, headers, signal, client=client)
