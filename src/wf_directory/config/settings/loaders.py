"""Config settings – EnvSettingsLoader, DotenvSettingsLoader.

Every dataclass field of a :class:`Settings` subclass maps to one variable,
``<PREFIX>_<FIELD>`` upper-cased (``WFDIR_PAGE_SIZE``). Values are parsed
according to the field's annotation; only the scalar types settings use are
supported.
"""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from typing import Any, Callable, Mapping, TypeVar

from dotenv import load_dotenv

from wf_directory.config.settings.base import Settings
from wf_directory.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_PARSERS: dict[Any, Callable[[str], Any]] = {
    int: int,
    float: float,
    str: str,
}


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment variables (``os.environ`` unless *environ* is given)."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = settings_class._prefix.upper()
        hints = typing.get_type_hints(settings_class)
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(key)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(key, needed_by=settings_class.__name__)
                continue
            values[field.name] = self._parse(key, raw, hints[field.name])

        return settings_class(**values)

    @staticmethod
    def _parse(key: str, raw: str, annotation: Any) -> Any:
        parser = _PARSERS.get(annotation)
        if parser is None:
            raise ConfigError(f"{key}: unsupported setting type {annotation!r}")
        try:
            return parser(raw.strip())
        except ValueError as exc:
            raise InvalidSettingValueError(key, raw, f"is not a valid {annotation.__name__}", cause=exc) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the process environment, then read it like :class:`EnvSettingsLoader`."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
