"""Protocol – reply frame decoder."""
from __future__ import annotations

from typing import Any

from mp_ftsearch.kernel.errors import CommandError, ReplyDecodeError


def decode_reply(frame: Any, command: str | None = None) -> Any:
    """Map a parsed reply frame into plain Python values.

    * ``bytes`` become ``str`` when they are valid UTF-8, otherwise stay ``bytes``
    * arrays (``list``/``tuple``/``set``) become ``list``, maps become ``dict``
    * ``int``, ``float``, ``bool``, ``str`` and ``None`` pass through
    * an error reply raises :class:`CommandError`

    Anything else raises :class:`ReplyDecodeError`.
    """
    match frame:
        case None | bool() | int() | float() | str():
            return frame
        case bytes() | bytearray() | memoryview():
            raw = bytes(frame)
            try:
                return raw.decode("utf-8")
            except UnicodeDecodeError:
                return raw
        case list() | tuple() | set() | frozenset():
            return [decode_reply(item, command) for item in frame]
        case dict():
            return {decode_reply(k, command): decode_reply(v, command) for k, v in frame.items()}
        case BaseException():
            raise CommandError(command, str(frame), cause=frame)
        case _:
            raise ReplyDecodeError(
                f"Unexpected reply frame of type {type(frame).__name__}",
                payload_type=type(frame).__name__,
            )


__all__ = ["decode_reply"]
