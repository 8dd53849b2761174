"""Single-slot transient status messages."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Literal

from config.client import TOAST_DURATION_SECONDS, TOAST_EXIT_SECONDS

logger = logging.getLogger(__name__)

ToastKind = Literal["info", "success", "warning", "error"]
ToastEvent = Literal["show", "leave", "dismiss"]
ToastListener = Callable[[ToastEvent, "Toast"], None]


@dataclass
class Toast:
    message: str
    kind: ToastKind = "info"
    leaving: bool = False

    @property
    def css_class(self) -> str:
        return f"toast toast-{self.kind}"


class Toaster:
    """Show one toast at a time.

    Showing a new toast dismisses the current one and cancels its timer. Each
    toast stays for ``duration`` seconds, then spends ``exit_duration`` seconds
    in its leaving state before it is removed.
    """

    def __init__(
        self,
        *,
        duration: float = TOAST_DURATION_SECONDS,
        exit_duration: float = TOAST_EXIT_SECONDS,
    ):
        self._duration = duration
        self._exit_duration = exit_duration
        self._current: Toast | None = None
        self._timer: asyncio.Task[None] | None = None
        self._listeners: list[ToastListener] = []

    @property
    def current(self) -> Toast | None:
        return self._current

    def add_listener(self, listener: ToastListener) -> None:
        self._listeners.append(listener)

    def _emit(self, event: ToastEvent, toast: Toast) -> None:
        for listener in self._listeners:
            listener(event, toast)

    def _cancel_timer(self) -> None:
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None

    def show(self, message: str, kind: ToastKind = "info") -> Toast:
        self.dismiss()
        toast = Toast(message=message, kind=kind)
        self._current = toast
        self._emit("show", toast)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop; toast %r will not auto-dismiss", message)
        else:
            self._timer = loop.create_task(self._expire(toast))
        return toast

    def dismiss(self) -> None:
        """Remove the current toast immediately."""

        self._cancel_timer()
        toast, self._current = self._current, None
        if toast is not None:
            self._emit("dismiss", toast)

    async def _expire(self, toast: Toast) -> None:
        await asyncio.sleep(self._duration)
        toast.leaving = True
        self._emit("leave", toast)
        await asyncio.sleep(self._exit_duration)
        if self._current is toast:
            self._current = None
            self._timer = None
            self._emit("dismiss", toast)

    async def aclose(self) -> None:
        timer = self._timer
        self.dismiss()
        if timer is not None:
            try:
                await timer
            except asyncio.CancelledError:
                pass


__all__ = ["Toast", "ToastEvent", "ToastKind", "Toaster"]
