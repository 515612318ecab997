"""Testing support – fakes for timers, the Query Service and change feeds."""

from wf_directory.testing.fakes import (
    InMemoryChangeFeed,
    ManualTimer,
    ManualTimers,
    PendingCall,
    ScriptedQueryService,
)

__all__ = [
    "InMemoryChangeFeed",
    "ManualTimer",
    "ManualTimers",
    "PendingCall",
    "ScriptedQueryService",
]
