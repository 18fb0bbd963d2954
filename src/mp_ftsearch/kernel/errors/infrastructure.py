"""Infrastructure errors: transport failures and reply decoding."""

from __future__ import annotations

from typing import Any

from mp_ftsearch.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a caller error."""

    default_code = "infrastructure_error"


class ConnectionError(InfrastructureError):  # noqa: A001
    """Failed to reach the search server."""

    default_code = "connection_error"
    context_fields = ("resource",)

    def __init__(
        self,
        resource: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not connect to '{resource}'", **kwargs)
        self.resource = resource


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class ReplyDecodeError(SerializationError):
    """A reply frame has a shape the decoder does not understand."""

    default_code = "reply_decode_error"


class CommandError(InfrastructureError):
    """The server answered a command with an error reply."""

    default_code = "command_error"
    context_fields = ("command",)

    def __init__(
        self,
        command: str | None,
        message: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.command = command


__all__ = [
    "CommandError",
    "ConnectionError",
    "InfrastructureError",
    "ReplyDecodeError",
    "SerializationError",
]
