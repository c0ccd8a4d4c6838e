"""
DELETE request function.
"""
from typing import Any, Optional

import httpx

from ..abort import AbortSignal
from ..types import HeadersInit, SimpleResponse
from .base import send_request


async def http_delete(
    url: str,
    headers: Optional[HeadersInit] = None,
    signal: Optional[AbortSignal] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> SimpleResponse[Any]:
    """Perform a DELETE request. No body is sent."""
    return await send_request("DELETE", url, headers, signal, client=client)
