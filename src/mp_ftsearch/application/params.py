"""Application – trailing PARAMS / DIALECT blocks shared by search and aggregate."""
from __future__ import annotations

from typing import Any, Mapping

from mp_ftsearch.kernel.types import WireValue, to_integer, to_value
from mp_ftsearch.protocol import Keyword

__all__ = ["encode_dialect", "encode_params"]


def encode_params(args: list[WireValue], params: Mapping[str, Any]) -> None:
    """``PARAMS 2K name value ...``; nothing for an empty mapping."""
    if not params:
        return
    args.extend([Keyword.PARAMS, 2 * len(params)])
    for name, value in params.items():
        args.extend([name, to_value(value, f"params.{name}")])


def encode_dialect(args: list[WireValue], dialect: int | None) -> None:
    if dialect is not None:
        args.extend([Keyword.DIALECT, to_integer(dialect, "dialect")])
