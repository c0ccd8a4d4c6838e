"""
Configuration for simple_fetch.
"""
import os

import httpx

DEFAULT_CONTENT_TYPE = "application/json"
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"
UNREADABLE_BODY_MESSAGE = "Unable to parse response text"

# Methods that may carry a request body
BODY_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})

DEBUG_ENV_VAR = "SIMPLE_FETCH_DEBUG"

_TRUTHY = {"1", "true", "yes"}


def is_ssl_verify_disabled_by_env() -> bool:
    """
    Check if SSL verification is disabled via environment variables.

    Returns True if any of these are set:
    - NODE_TLS_REJECT_UNAUTHORIZED=0
    - SSL_CERT_VERIFY=0
    """
    node_tls = os.environ.get("NODE_TLS_REJECT_UNAUTHORIZED", "")
    ssl_cert_verify = os.environ.get("SSL_CERT_VERIFY", "")
    return node_tls == "0" or ssl_cert_verify == "0"


def is_debug_enabled() -> bool:
    """Whether request/response tracing is switched on via SIMPLE_FETCH_DEBUG."""
    return os.environ.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY


def create_default_client() -> httpx.AsyncClient:
    """Create the short-lived transport used when the caller supplies none."""
    return httpx.AsyncClient(
        verify=not is_ssl_verify_disabled_by_env(),
        follow_redirects=True,
    )
