"""In-memory adapter – Query Service over plain Python records."""
from wf_directory.adapters.memory.query_service import InMemoryQueryService, matches

__all__ = ["InMemoryQueryService", "matches"]
