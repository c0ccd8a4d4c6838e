"""
Tests for abort.py, config.py, errors.py and console.py
"""
import asyncio

import httpx
import pytest

from simple_fetch import config
from simple_fetch.abort import AbortController
from simple_fetch.console import default_error_logger, print_request, print_response
from simple_fetch.errors import (
    InvalidMethodBodyError,
    InvalidQueryParamError,
    RequestAbortedError,
    SimpleFetchError,
    SimpleFetchRequestError,
    TransportError,
)
from simple_fetch.methods import http_get


class TestAbortController:
    """Tests for AbortController / AbortSignal."""

    def test_initial_state(self):
        controller = AbortController()
        assert controller.signal.aborted is False
        assert controller.signal.reason is None
        controller.signal.throw_if_aborted()

    # State: first reason wins
    def test_abort_keeps_first_reason(self):
        controller = AbortController()
        controller.abort("first")
        controller.abort("second")
        assert controller.signal.aborted is True
        assert controller.signal.reason == "first"

    def test_throw_if_aborted(self):
        controller = AbortController()
        controller.abort()
        with pytest.raises(RequestAbortedError, match="This operation was aborted"):
            controller.signal.throw_if_aborted()

    # Path: wait returns once fired
    @pytest.mark.asyncio
    async def test_wait(self):
        controller = AbortController()
        asyncio.get_running_loop().call_soon(controller.abort)
        await asyncio.wait_for(controller.signal.wait(), timeout=1)
        assert controller.signal.aborted

    # Path: scheduled abort fires with a TimeoutError reason
    @pytest.mark.asyncio
    async def test_abort_after(self):
        controller = AbortController()
        controller.abort_after(0.01)
        await asyncio.wait_for(controller.signal.wait(), timeout=1)
        assert isinstance(controller.signal.reason, TimeoutError)

    # State: explicit abort cancels the pending timer
    @pytest.mark.asyncio
    async def test_abort_cancels_timer(self):
        controller = AbortController()
        controller.abort_after(0.01)
        controller.abort("manual")
        await asyncio.sleep(0.03)
        assert controller.signal.reason == "manual"

    # Error Path: abort_after needs a running loop
    def test_abort_after_without_loop(self):
        with pytest.raises(RuntimeError):
            AbortController().abort_after(1)


class TestConfig:
    """Tests for config.py environment handling."""

    @pytest.mark.parametrize(
        "var,value,expected",
        [
            ("NODE_TLS_REJECT_UNAUTHORIZED", "0", True),
            ("SSL_CERT_VERIFY", "0", True),
            ("SSL_CERT_VERIFY", "1", False),
        ],
    )
    def test_ssl_verify_env(self, monkeypatch, var, value, expected):
        monkeypatch.delenv("NODE_TLS_REJECT_UNAUTHORIZED", raising=False)
        monkeypatch.delenv("SSL_CERT_VERIFY", raising=False)
        monkeypatch.setenv(var, value)
        assert config.is_ssl_verify_disabled_by_env() is expected

    def test_ssl_verify_default(self, monkeypatch):
        monkeypatch.delenv("NODE_TLS_REJECT_UNAUTHORIZED", raising=False)
        monkeypatch.delenv("SSL_CERT_VERIFY", raising=False)
        assert config.is_ssl_verify_disabled_by_env() is False

    @pytest.mark.parametrize(
        "value,expected", [("1", True), ("TRUE", True), ("yes", True), ("0", False), ("", False)]
    )
    def test_debug_flag(self, monkeypatch, value, expected):
        monkeypatch.setenv(config.DEBUG_ENV_VAR, value)
        assert config.is_debug_enabled() is expected

    @pytest.mark.asyncio
    async def test_create_default_client(self):
        client = config.create_default_client()
        try:
            assert isinstance(client, httpx.AsyncClient)
            assert client.follow_redirects is True
        finally:
            await client.aclose()


class TestErrors:
    """Tests for the error hierarchy."""

    def test_hierarchy(self):
        for cls in (InvalidMethodBodyError, InvalidQueryParamError, SimpleFetchRequestError, TransportError):
            assert issubclass(cls, SimpleFetchError)

    # Boundary: missing status and status text
    def test_request_error_defaults(self):
        error = SimpleFetchRequestError("GET", "https://x.io")
        assert str(error) == "GET request to https://x.io failed with status unknown: No status text"
        assert error.status is None

    def test_transport_error_default_message(self):
        assert str(TransportError()) == "An unknown error occurred"
        assert str(TransportError("")) == "An unknown error occurred"


class TestConsole:
    """Tests for console output."""

    def test_default_error_logger(self, capsys):
        default_error_logger("Error with GET request to x:", ValueError("bad [value]"))
        err = capsys.readouterr().err
        assert "ValueError" in err
        assert "bad [value]" in err

    def test_print_request_masks_credentials(self, capsys):
        print_request("POST", "https://x.io", {"Authorization": "Bearer secret"}, {"a": 1})
        out = capsys.readouterr().out
        assert "POST" in out
        assert "secret" not in out

    def test_print_response(self, capsys):
        print_response("https://x.io", 404, "Not Found", {}, None)
        assert "404" in capsys.readouterr().out

    # Path: tracing switched on through the environment
    @pytest.mark.asyncio
    async def test_tracing_enabled(self, monkeypatch, capsys, json_client):
        monkeypatch.setenv(config.DEBUG_ENV_VAR, "1")
        await http_get("https://api.example.com/resource", client=json_client)
        out = capsys.readouterr().out
        assert "Request" in out
        assert "Response" in out
