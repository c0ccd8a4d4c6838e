"""
PUT request function.
"""
from typing import Any, Optional

import httpx

from ..abort import AbortSignal
from ..types import HeadersInit, SimpleResponse
from .base import send_request


async def http_put(
    url: str,
    body: Any = None,
    headers: Optional[HeadersInit] = None,
    signal: Optional[AbortSignal] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> SimpleResponse[Any]:
    """Perform a PUT request; body handling matches http_post."""
    return await send_request(
        "PUT", url, headers, signal, body=body, accepts_body=True, client=client
    )
