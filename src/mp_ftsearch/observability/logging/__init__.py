"""Observability – structured logging helpers."""
from mp_ftsearch.observability.logging.factory import configure_logging
from mp_ftsearch.observability.logging.processors import get_logger, redact_payloads

__all__ = ["configure_logging", "get_logger", "redact_payloads"]
