"""
POST request function.
"""
from typing import Any, Optional

import httpx

from ..abort import AbortSignal
from ..types import HeadersInit, SimpleResponse
from .base import send_request


async def http_post(
    url: str,
    body: Any = None,
    headers: Optional[HeadersInit] = None,
    signal: Optional[AbortSignal] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> SimpleResponse[Any]:
    """
    Perform a POST request.

    Mappings and lists are JSON-encoded when Content-Type is application/json;
    any other body is sent as given.
    """
    return await send_request(
        "POST", url, headers, signal, body=body, accepts_body=True, client=client
    )
