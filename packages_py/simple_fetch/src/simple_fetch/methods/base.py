"""
Shared request algorithm for the per-method functions.

Every method runs the same steps: inspect Content-Type, prepare the body,
call the transport (optionally racing an AbortSignal), check the status,
parse JSON into a SimpleResponse. Request errors propagate unchanged; any
other failure is normalized to TransportError.
"""
import asyncio
import json
import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from ..abort import AbortSignal
from ..config import (
    UNKNOWN_ERROR_MESSAGE,
    UNREADABLE_BODY_MESSAGE,
    create_default_client,
    is_debug_enabled,
)
from ..console import print_request, print_response
from ..errors import RequestAbortedError, SimpleFetchRequestError, TransportError
from ..types import HeadersInit, SimpleResponse
from ..utils.headers import get_content_type, mask_headers_for_logging, normalize_headers

logger = logging.getLogger("simple_fetch.methods")


def _is_json_content_type(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json"


def build_body(body: Any, content_type: str) -> Dict[str, Any]:
    """
    Map a request body onto httpx request keywords.

    JSON content types serialize mappings and lists with json.dumps. Anything
    else is passed through: str/bytes as raw content, other mappings as form
    fields, remaining values as their str().
    """
    if body is None:
        return {}
    if _is_json_content_type(content_type) and isinstance(body, (Mapping, list, tuple)):
        return {"content": json.dumps(body)}
    if isinstance(body, (str, bytes, bytearray)):
        return {"content": body}
    if isinstance(body, Mapping):
        return {"data": body}
    return {"content": str(body)}


def _read_error_text(response: httpx.Response) -> str:
    try:
        return response.text
    except Exception as exc:
        logger.debug(f"_read_error_text: could not decode error body: {exc}")
        return UNREADABLE_BODY_MESSAGE


def _parse_data(response: httpx.Response) -> Any:
    if not response.content:
        return None
    return response.json()


async def _dispatch(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    headers: Dict[str, str],
    body_kwargs: Dict[str, Any],
    signal: Optional[AbortSignal],
) -> httpx.Response:
    if signal is None:
        return await client.request(method, url, headers=headers, **body_kwargs)

    signal.throw_if_aborted()

    request_task = asyncio.ensure_future(
        client.request(method, url, headers=headers, **body_kwargs)
    )
    abort_task = asyncio.ensure_future(signal.wait())
    try:
        await asyncio.wait(
            {request_task, abort_task}, return_when=asyncio.FIRST_COMPLETED
        )
    finally:
        pending = [task for task in (request_task, abort_task) if not task.done()]
        for task in pending:
            task.cancel()
        # Let cancelled tasks unwind before the caller closes the client
        await asyncio.gather(*pending, return_exceptions=True)

    if request_task.done() and not request_task.cancelled():
        return request_task.result()

    raise RequestAbortedError(signal.reason)


async def send_request(
    method: str,
    url: str,
    headers: Optional[HeadersInit] = None,
    signal: Optional[AbortSignal] = None,
    *,
    body: Any = None,
    accepts_body: bool = False,
    client: Optional[httpx.AsyncClient] = None,
) -> SimpleResponse[Any]:
    """
    Issue one HTTP request and wrap the result.

    Raises:
        SimpleFetchRequestError: response status outside 200-299.
        TransportError: network failure, abort, invalid JSON or any other error.
    """
    try:
        content_type = get_content_type(headers)
        request_headers = normalize_headers(headers)
        body_kwargs = build_body(body, content_type) if accepts_body else {}

        logger.debug(
            f"send_request: method={method}, url={url}, "
            f"headers={mask_headers_for_logging(request_headers)}, has_body={bool(body_kwargs)}"
        )
        if is_debug_enabled():
            print_request(method, url, request_headers, body if accepts_body else None)

        if client is not None:
            response = await _dispatch(client, method, url, request_headers, body_kwargs, signal)
        else:
            async with create_default_client() as owned_client:
                response = await _dispatch(
                    owned_client, method, url, request_headers, body_kwargs, signal
                )

        logger.debug(f"send_request: {method} {url} -> {response.status_code}")

        if not (200 <= response.status_code < 300):
            error_text = _read_error_text(response)
            if is_debug_enabled():
                print_response(url, response.status_code, response.reason_phrase, response.headers, error_text)
            raise SimpleFetchRequestError(
                method,
                url,
                response.status_code,
                response.reason_phrase,
                error_text,
            )

        data = _parse_data(response)
        if is_debug_enabled():
            print_response(url, response.status_code, response.reason_phrase, response.headers, data)

        return SimpleResponse(
            data=data,
            status=response.status_code,
            headers=response.headers,
            raw=response,
        )
    except SimpleFetchRequestError:
        raise
    except Exception as exc:
        logger.debug(f"send_request: {method} {url} failed: {exc!r}")
        raise TransportError(str(exc) or UNKNOWN_ERROR_MESSAGE) from exc
