"""Application – SearchField, shared by LOAD and RETURN projections."""
from __future__ import annotations

from dataclasses import dataclass

from mp_ftsearch.kernel.types import WireValue
from mp_ftsearch.protocol import Keyword

__all__ = ["SearchField", "encode_fields"]


@dataclass(frozen=True)
class SearchField:
    """A field identifier with an optional ``AS`` alias."""
    identifier: str
    alias: str | None = None


def encode_fields(args: list[WireValue], fields: list[SearchField] | tuple[SearchField, ...]) -> None:
    """Append ``identifier [AS alias]`` for every field, in order."""
    for field in fields:
        args.append(field.identifier)
        if field.alias is not None:
            args.extend([Keyword.AS, field.alias])
