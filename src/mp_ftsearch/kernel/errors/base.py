"""BaseError: root of every error raised by mp-ftsearch."""

from __future__ import annotations

import json
from typing import Any, ClassVar


class BaseError(Exception):
    """Root of the error hierarchy.

    ``code`` is a stable slug for log filters and callers; ``detail`` carries
    free-form context.  Subclasses list in ``context_fields`` the attributes
    (the failing command, the offending argument, ...) that :meth:`to_dict`
    lifts to the top level, so a log line can be filtered on them directly.
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
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        for name in self.context_fields:
            value = getattr(self, name, None)
            if value is not None:
                payload[name] = value
        payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
