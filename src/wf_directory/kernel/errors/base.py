"""Kernel errors – BaseError, the root of every wf-directory error.

Errors travel two ways: raised to callers, and flattened by
:meth:`BaseError.to_dict` into ``listing.fetch.failed`` and similar log
events. Subclasses list the attributes that identify them in
``context_fields`` so those show up in the flattened form too.
"""

from __future__ import annotations

import json
from typing import Any, ClassVar


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context, e.g. a truncated response body.
        cause: Original exception that triggered this error.
    """

    default_code: ClassVar[str] = "base_error"
    context_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    @property
    def context(self) -> dict[str, Any]:
        """The identifying attributes named by ``context_fields``."""
        return {name: getattr(self, name, None) for name in self.context_fields}

    def to_dict(self) -> dict[str, Any]:
        """Flatten for log events; every value is JSON-safe."""
        payload: dict[str, Any] = {
            "type": type(self).__name__,
            "code": self.code,
            "message": self.message,
            **self.context,
        }
        if self.detail:
            payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)


__all__ = ["BaseError"]
