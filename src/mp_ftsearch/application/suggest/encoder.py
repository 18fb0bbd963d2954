"""Application suggest – FT.SUGADD / FT.SUGGET argument encoders."""
from __future__ import annotations

from mp_ftsearch.kernel.types import WireValue, to_bytes, to_double, to_text, to_unsigned
from mp_ftsearch.protocol import Keyword

__all__ = ["encode_sugadd", "encode_sugget"]


def encode_sugadd(
    key: str,
    string: str,
    score: float,
    incr: bool = False,
    payload: bytes | None = None,
) -> list[WireValue]:
    args: list[WireValue] = [to_text(key, "key"), to_text(string, "string"), to_double(score, "score")]
    if incr:
        args.append(Keyword.INCR)
    if payload is not None:
        args.extend([Keyword.PAYLOAD, to_bytes(payload, "payload")])
    return args


def encode_sugget(
    key: str,
    prefix: str,
    fuzzy: bool = False,
    withscores: bool = False,
    withpayloads: bool = False,
    max: int | None = None,  # noqa: A002
) -> list[WireValue]:
    args: list[WireValue] = [to_text(key, "key"), to_text(prefix, "prefix")]
    if fuzzy:
        args.append(Keyword.FUZZY)
    if withscores:
        args.append(Keyword.WITHSCORES)
    if withpayloads:
        args.append(Keyword.WITHPAYLOADS)
    if max is not None:
        args.extend([Keyword.MAX, to_unsigned(max, "max")])
    return args
