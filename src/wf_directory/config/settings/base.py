"""Config settings – Settings base class and DirectorySettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from wf_directory.config.validation import InvalidSettingValueError

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class DirectorySettings(Settings):
    """Runtime knobs for a directory listing.

    Loaded from ``WFDIR_*`` environment variables, e.g. ``WFDIR_PAGE_SIZE=50``.
    """

    _prefix: ClassVar[str] = "WFDIR"

    page_size: int = 25
    debounce_ms: int = 300
    page_window_radius: int = 2
    query_url: str = ""
    api_key: str = ""
    request_timeout: float = 10.0
    alias_file: str = ""
    log_level: str = "INFO"

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000

    def _validate(self) -> None:
        if self.page_size < 1:
            raise InvalidSettingValueError("page_size", self.page_size, "must be >= 1")
        if self.debounce_ms < 0:
            raise InvalidSettingValueError("debounce_ms", self.debounce_ms, "must be >= 0")
        if self.page_window_radius < 0:
            raise InvalidSettingValueError(
                "page_window_radius", self.page_window_radius, "must be >= 0"
            )
        if self.request_timeout <= 0:
            raise InvalidSettingValueError(
                "request_timeout", self.request_timeout, "must be > 0"
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"must be one of {sorted(_LOG_LEVELS)}"
            )


__all__ = ["DirectorySettings", "Settings"]
