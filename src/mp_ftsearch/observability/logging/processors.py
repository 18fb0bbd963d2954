"""Observability – get_logger helper and the command summary processor."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def redact_payloads(
    logger: Any,           # noqa: ARG001
    method_name: str,      # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor that replaces ``bytes`` values with their length."""
    for key, value in list(event_dict.items()):
        if isinstance(value, (bytes, bytearray)):
            event_dict[key] = f"<{len(value)} bytes>"
    return event_dict


__all__ = ["get_logger", "redact_payloads"]
