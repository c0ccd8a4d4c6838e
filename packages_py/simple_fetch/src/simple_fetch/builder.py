"""
Fluent request builder.

SimpleBuilder accumulates URL, headers, body and query params through
chainable calls, then runs one of the terminal methods (fetch, post, put,
patch, delete). It is a mutable chain: configuration persists across
terminal calls and is never reset implicitly, so one builder can be reused.

Example:
    response = await (
        SimpleBuilder("https://api.example.com/users")
        .headers({"Authorization": "Bearer token"})
        .params({"page": 1, "limit": 10})
        .fetch()
    )
    print(response.status, response.data)
"""
import logging
from typing import Any, Awaitable, Callable, Optional

import httpx

from .abort import AbortController, AbortSignal
from .config import BODY_METHODS, DEFAULT_CONTENT_TYPE
from .console import default_error_logger
from .errors import InvalidMethodBodyError
from .methods.delete import http_delete
from .methods.get import http_get
from .methods.patch import http_patch
from .methods.post import http_post
from .methods.put import http_put
from .types import ErrorLogger, HeaderDict, HeadersInit, HttpMethod, QueryParams, SimpleResponse
from .utils.headers import has_header, mask_headers_for_logging, merge_headers, normalize_headers
from .utils.query import serialize_query_params

logger = logging.getLogger("simple_fetch.builder")

RequestFn = Callable[[Optional[AbortSignal]], Awaitable[SimpleResponse[Any]]]


class SimpleBuilder:
    """Chainable HTTP request builder."""

    def __init__(
        self,
        url: str,
        default_headers: Optional[HeadersInit] = None,
        logger: ErrorLogger = default_error_logger,
        *,
        use_abort_controller: bool = True,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._url = url
        self._request_body: Any = None
        self._request_headers: HeaderDict = normalize_headers(default_headers)
        self._request_params = ""
        self._logger = logger
        self._use_abort_controller = use_abort_controller
        self._abort_controller: Optional[AbortController] = None
        self._active_controller: Optional[AbortController] = None
        self._client = client

    @property
    def url(self) -> str:
        return self._url

    @property
    def request_body(self) -> Any:
        return self._request_body

    @property
    def request_headers(self) -> HeaderDict:
        return dict(self._request_headers)

    @property
    def request_params(self) -> str:
        return self._request_params

    # Configuration

    def body(self, payload: Any) -> "SimpleBuilder":
        """Set the request body."""
        self._request_body = payload
        return self

    def headers(self, extra: HeadersInit) -> "SimpleBuilder":
        """Merge extra headers onto the current ones; new values win."""
        self._request_headers = merge_headers(self._request_headers, extra)
        return self

    def params(self, values: QueryParams, lower_case_keys: bool = False) -> "SimpleBuilder":
        """
        Serialize query parameters, replacing any previously set.

        Raises InvalidQueryParamObjectError / InvalidQueryParamError on bad input.
        """
        self._request_params = serialize_query_params(values, lower_case_keys)
        return self

    def abort_controller(self, controller: AbortController) -> "SimpleBuilder":
        """Use controller's signal for every following terminal call."""
        self._abort_controller = controller
        return self

    def abort(self, reason: Any = None) -> bool:
        """Abort the controller of the most recent terminal call, if any."""
        if self._active_controller is None:
            return False
        self._active_controller.abort(reason)
        return True

    # Internals

    def _build_url(self) -> str:
        return f"{self._url}?{self._request_params}" if self._request_params else self._url

    def _prepare_headers(self) -> None:
        if self._request_body is not None and not has_header(self._request_headers, "Content-Type"):
            self._request_headers["Content-Type"] = DEFAULT_CONTENT_TYPE

    def _resolve_signal(self) -> Optional[AbortSignal]:
        if self._abort_controller is not None:
            self._active_controller = self._abort_controller
        elif self._use_abort_controller:
            self._active_controller = AbortController()
        else:
            self._active_controller = None
        return self._active_controller.signal if self._active_controller else None

    async def _handle_request(self, method: HttpMethod, request_fn: RequestFn) -> SimpleResponse[Any]:
        if method not in BODY_METHODS and self._request_body is not None:
            raise InvalidMethodBodyError(method, self._url)

        self._prepare_headers()
        signal = self._resolve_signal()
        logger.debug(
            f"SimpleBuilder: {method} {self._build_url()} "
            f"headers={mask_headers_for_logging(self._request_headers)}"
        )

        try:
            return await request_fn(signal)
        except Exception as error:
            self._logger(f"Error with {method} request to {self._url}:", error)
            raise

    # Terminal operations

    async def fetch(self) -> SimpleResponse[Any]:
        """Execute a GET request."""
        return await self._handle_request(
            "GET",
            lambda signal: http_get(
                self._build_url(), self._request_headers, signal, client=self._client
            ),
        )

    async def post(self) -> SimpleResponse[Any]:
        """Execute a POST request with the configured body."""
        return await self._handle_request(
            "POST",
            lambda signal: http_post(
                self._build_url(), self._request_body, self._request_headers, signal,
                client=self._client,
            ),
        )

    async def put(self) -> SimpleResponse[Any]:
        """Execute a PUT request with the configured body."""
        return await self._handle_request(
            "PUT",
            lambda signal: http_put(
                self._build_url(), self._request_body, self._request_headers, signal,
                client=self._client,
            ),
        )

    async def patch(self) -> SimpleResponse[Any]:
        """Execute a PATCH request with the configured body."""
        return await self._handle_request(
            "PATCH",
            lambda signal: http_patch(
                self._build_url(), self._request_body, self._request_headers, signal,
                client=self._client,
            ),
        )

    async def delete(self) -> SimpleResponse[Any]:
        """Execute a DELETE request. A configured body is not sent."""
        return await self._handle_request(
            "DELETE",
            lambda signal: http_delete(
                self._build_url(), self._request_headers, signal, client=self._client
            ),
        )

    def __repr__(self) -> str:
        return f"SimpleBuilder(url={self._build_url()!r}, has_body={self._request_body is not None})"
