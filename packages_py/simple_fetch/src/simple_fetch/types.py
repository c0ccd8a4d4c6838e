"""
Type definitions for simple_fetch.
"""
from dataclasses import dataclass
from typing import (
    Callable,
    Dict,
    Generic,
    List,
    Literal,
    Mapping,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

import httpx

T = TypeVar("T")

# HTTP methods supported by the builder
HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

# A single query value: a string, a number, or a list of those
QueryValue = Union[str, int, float, List[Union[str, int, float]]]
QueryParams = Mapping[str, QueryValue]

# Accepted header inputs: plain mapping, list of (key, value) pairs, or httpx.Headers
HeadersInit = Union[Mapping[str, str], Sequence[Tuple[str, str]], httpx.Headers]

# Canonical header representation kept by the builder
HeaderDict = Dict[str, str]

# Failure observer injected into the builder
ErrorLogger = Callable[[str, BaseException], None]


@dataclass(frozen=True)
class SimpleResponse(Generic[T]):
    """Response envelope returned by every successful request."""

    data: T
    status: int
    headers: httpx.Headers
    raw: httpx.Response
