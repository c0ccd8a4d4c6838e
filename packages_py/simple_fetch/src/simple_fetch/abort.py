"""
Cooperative request cancellation.

An AbortController owns one AbortSignal. The signal is handed to a request
function, which races the transport call against it; firing the controller
cancels the in-flight call.
"""
import asyncio
import logging
from typing import Any, Optional

from .errors import RequestAbortedError

logger = logging.getLogger("simple_fetch.abort")


class AbortSignal:
    """Read side of a cancellation token."""

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._reason: Any = None

    @property
    def aborted(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> Any:
        return self._reason

    def throw_if_aborted(self) -> None:
        """Raise RequestAbortedError if the signal already fired."""
        if self.aborted:
            raise RequestAbortedError(self._reason)

    async def wait(self) -> None:
        """Suspend until the signal fires."""
        await self._event.wait()

    def _fire(self, reason: Any) -> None:
        if self.aborted:
            return
        self._reason = reason
        self._event.set()


class AbortController:
    """
    Write side of a cancellation token.

    Example:
        controller = AbortController()
        controller.abort_after(5.0)  # caller-imposed timeout
        await simple(url).abort_controller(controller).fetch()
    """

    def __init__(self) -> None:
        self._signal = AbortSignal()
        self._timer: Optional[asyncio.TimerHandle] = None

    @property
    def signal(self) -> AbortSignal:
        return self._signal

    def abort(self, reason: Any = None) -> None:
        """Fire the signal. Repeated calls keep the first reason."""
        logger.debug(f"AbortController.abort: reason={reason!r}")
        self._cancel_timer()
        self._signal._fire(reason)

    def abort_after(self, delay: float) -> None:
        """Schedule an abort on the running event loop after delay seconds."""
        self._cancel_timer()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(delay, self.abort, TimeoutError(f"Aborted after {delay}s"))

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
