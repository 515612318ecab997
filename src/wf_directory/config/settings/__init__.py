"""Config settings – 12-factor env-based configuration."""
from wf_directory.config.settings.base import DirectorySettings, Settings
from wf_directory.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DirectorySettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
]
