"""
PATCH request function.
"""
from typing import Any, Optional

import httpx

from ..abort import AbortSignal
from ..types import HeadersInit, SimpleResponse
from .base import send_request


async def http_patch(
    url: str,
    body: Any = None,
    headers: Optional[HeadersInit] = None,
    signal: Optional[AbortSignal] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> SimpleResponse[Any]:
    return await send_request(
        "PATCH", url, headers, signal, body=body, accepts_body=True, client=client
    )
