"""Application search – FtSearchOptions and its structured sub-options."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from mp_ftsearch.application.fields import SearchField
from mp_ftsearch.kernel.types import RangeBound
from mp_ftsearch.protocol import SortOrder

__all__ = [
    "FtSearchOptions",
    "GeoFilter",
    "GeoPosition",
    "GeoUnit",
    "Highlight",
    "NumericFilter",
    "SearchSortBy",
    "Summarize",
]


class GeoUnit(StrEnum):
    METERS = "m"
    KILOMETERS = "km"
    MILES = "mi"
    FEET = "ft"


@dataclass(frozen=True)
class NumericFilter:
    """``FILTER attribute min max``.

    Bounds are :class:`RangeBound` values or plain numbers (inclusive);
    ``float("inf")`` / ``float("-inf")`` serialise as ``+inf`` / ``-inf``.
    """
    attribute: str
    min: RangeBound | int | float
    max: RangeBound | int | float


@dataclass(frozen=True)
class GeoPosition:
    longitude: float
    latitude: float


@dataclass(frozen=True)
class GeoFilter:
    attribute: str
    position: GeoPosition
    radius: int | float
    unit: GeoUnit = GeoUnit.KILOMETERS


@dataclass(frozen=True)
class Summarize:
    fields: tuple[str, ...] = ()
    frags: int | None = None
    len: int | None = None
    separator: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))


@dataclass(frozen=True)
class Highlight:
    fields: tuple[str, ...] = ()
    tags: tuple[str, str] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))


@dataclass(frozen=True)
class SearchSortBy:
    attribute: str
    order: SortOrder | None = None
    withcount: bool = False


@dataclass(frozen=True)
class FtSearchOptions:
    """Options for ``FT.SEARCH``.

    Field order mirrors emission order.  Unset flags, ``None`` values and
    empty collections contribute no tokens at all.  Sequences are stored as
    tuples and ``params`` as a read-only mapping, so a command built later
    sees exactly what was passed in.
    """

    nocontent: bool = False
    verbatim: bool = False
    nostopwords: bool = False
    withscores: bool = False
    withpayloads: bool = False
    withsortkeys: bool = False
    filters: tuple[NumericFilter, ...] = ()
    geofilters: tuple[GeoFilter, ...] = ()
    inkeys: tuple[str, ...] = ()
    infields: tuple[str, ...] = ()
    return_fields: tuple[SearchField, ...] = ()
    summarize: Summarize | None = None
    highlight: Highlight | None = None
    slop: int | None = None
    timeout: int | None = None
    inorder: bool = False
    language: str | None = None
    expander: str | None = None
    scorer: str | None = None
    explainscore: bool = False
    payload: bytes | None = None
    sortby: SearchSortBy | None = None
    limit: tuple[int, int] | None = None
    params: Mapping[str, Any] = field(default_factory=dict)
    dialect: int | None = None

    def __post_init__(self) -> None:
        for name in ("filters", "geofilters", "inkeys", "infields", "return_fields"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        if self.limit is not None:
            object.__setattr__(self, "limit", tuple(self.limit))
        if isinstance(self.payload, (bytearray, memoryview)):
            object.__setattr__(self, "payload", bytes(self.payload))
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
