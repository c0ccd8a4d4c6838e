"""
Per-method request functions.
"""
from .base import build_body, send_request
from .delete import http_delete
from .get import http_get
from .patch import http_patch
from .post import http_post
from .put import http_put

__all__ = [
    "build_body",
    "send_request",
    "http_get",
    "http_post",
    "http_put",
    "http_patch",
    "http_delete",
]
