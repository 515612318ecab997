"""Kernel time – Timers port + implementations."""
from wf_directory.kernel.time.timers import AsyncioTimers, TimerHandle, Timers

__all__ = ["AsyncioTimers", "TimerHandle", "Timers"]
