"""Application commands – Transport port."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from mp_ftsearch.protocol import CommandBuilder

__all__ = ["Transport"]


@runtime_checkable
class Transport(Protocol):
    """Port: send one command and return the raw reply frame.

    Implementations call ``build()`` only once they are ready to send.  If
    ``build()`` raises, nothing is sent and the exception propagates
    unchanged.
    """

    async def request_response(self, build: CommandBuilder) -> Any: ...
