"""Domain errors: caller-supplied values the protocol cannot carry."""

from __future__ import annotations

from typing import Any

from mp_ftsearch.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a caller-supplied value breaks a protocol rule."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules."""

    default_code = "validation_error"


class ArgumentConversionError(ValidationError):
    """A command argument cannot be represented as a wire value.

    Raised while a command is being built, before anything is sent.
    ``argument`` names the offending option (``"limit.offset"``,
    ``"cursor.count"``, ...).
    """

    default_code = "argument_conversion"
    context_fields = ("argument",)

    def __init__(
        self,
        argument: str,
        value: Any,
        reason: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Cannot convert argument '{argument}' ({value!r}): {reason}",
            detail={"argument": argument, "value": repr(value), "reason": reason},
            **kwargs,
        )
        self.argument = argument
        self.value = value
        self.reason = reason


__all__ = [
    "ArgumentConversionError",
    "DomainError",
    "ValidationError",
]
