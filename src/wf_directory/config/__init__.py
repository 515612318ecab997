"""Config – 12-factor settings and loaders."""

from wf_directory.config.settings import (
    DirectorySettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
)
from wf_directory.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DirectorySettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
