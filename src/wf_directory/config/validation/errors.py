"""Config validation – errors raised while building DirectorySettings."""
from __future__ import annotations

from typing import Any

from wf_directory.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings or alias data could not be loaded or are inconsistent."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A setting with no default is absent, e.g. ``WFDIR_QUERY_URL`` for PostgREST."""

    default_code = "missing_required_setting"
    context_fields = ("setting_name",)

    def __init__(self, setting_name: str, *, needed_by: str = "", **kwargs: Any) -> None:
        suffix = f" (needed by {needed_by})" if needed_by else ""
        super().__init__(f"Setting '{setting_name}' is not set{suffix}", **kwargs)
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but out of range or of the wrong type."""

    default_code = "invalid_setting_value"
    context_fields = ("setting_name", "value", "reason")

    def __init__(self, setting_name: str, value: object, reason: str, **kwargs: Any) -> None:
        super().__init__(f"{setting_name}={value!r} {reason}", **kwargs)
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
