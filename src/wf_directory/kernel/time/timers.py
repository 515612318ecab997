"""Kernel time – Timers port + asyncio implementation."""
from __future__ import annotations

import asyncio
from typing import Callable, Protocol


class TimerHandle(Protocol):
    """A scheduled callback that can be cancelled before it fires."""

    def cancel(self) -> None: ...


class Timers(Protocol):
    """Port: schedule a callback after a delay (seconds)."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class AsyncioTimers:
    """Production timers backed by the running asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


__all__ = ["AsyncioTimers", "TimerHandle", "Timers"]
