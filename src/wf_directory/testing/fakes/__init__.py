"""Testing fakes – in-memory doubles for the engine's ports."""
from wf_directory.testing.fakes.change_feed import InMemoryChangeFeed
from wf_directory.testing.fakes.query_service import PendingCall, ScriptedQueryService
from wf_directory.testing.fakes.timers import ManualTimer, ManualTimers

__all__ = [
    "InMemoryChangeFeed",
    "ManualTimer",
    "ManualTimers",
    "PendingCall",
    "ScriptedQueryService",
]
