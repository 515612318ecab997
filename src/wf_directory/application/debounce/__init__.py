"""Application debounce – settle rapidly typed input after a quiet window."""
from wf_directory.application.debounce.controller import DEFAULT_QUIET_SECONDS, DebouncedInputController

__all__ = ["DEFAULT_QUIET_SECONDS", "DebouncedInputController"]
