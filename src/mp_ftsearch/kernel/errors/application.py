"""Application-layer errors: command-level concerns."""

from __future__ import annotations

from typing import Any

from mp_ftsearch.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnsupportedCommandError(ApplicationError):
    """The command has no argument encoder; nothing was sent."""

    default_code = "unsupported_command"
    context_fields = ("command",)

    def __init__(self, command: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Command '{command}' is not supported", **kwargs)
        self.command = command


__all__ = ["ApplicationError", "UnsupportedCommandError"]
