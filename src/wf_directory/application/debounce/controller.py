"""Application debounce – DebouncedInputController."""
from __future__ import annotations

from typing import Callable

from wf_directory.kernel.time import AsyncioTimers, TimerHandle, Timers

DEFAULT_QUIET_SECONDS = 0.3


class DebouncedInputController:
    """Turn a rapidly changing text value into settle events.

    Each :meth:`feed` restarts the quiet window; only when it elapses without
    another keystroke is *on_settle* called with the trimmed text. Explicit
    commitments (clearing the field) go through :meth:`settle_now` and skip
    the window entirely.
    """

    def __init__(
        self,
        on_settle: Callable[[str], None],
        *,
        quiet_seconds: float = DEFAULT_QUIET_SECONDS,
        timers: Timers | None = None,
    ) -> None:
        if quiet_seconds < 0:
            raise ValueError("quiet_seconds must be >= 0")
        self._on_settle = on_settle
        self._quiet = quiet_seconds
        self._timers: Timers = timers or AsyncioTimers()
        self._pending: TimerHandle | None = None
        self._raw = ""
        self._closed = False

    @property
    def raw(self) -> str:
        """The latest unsettled text as typed."""
        return self._raw

    @property
    def pending(self) -> bool:
        return self._pending is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def feed(self, raw: str) -> None:
        if self._closed:
            return
        self._raw = raw
        self._cancel()
        self._pending = self._timers.call_later(self._quiet, self._fire)

    def settle_now(self, raw: str = "") -> None:
        if self._closed:
            return
        self._raw = raw
        self._cancel()
        self._on_settle(raw.strip())

    def close(self) -> None:
        self._cancel()
        self._closed = True

    def _fire(self) -> None:
        self._pending = None
        if self._closed:
            return
        self._on_settle(self._raw.strip())

    def _cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None


__all__ = ["DEFAULT_QUIET_SECONDS", "DebouncedInputController"]
