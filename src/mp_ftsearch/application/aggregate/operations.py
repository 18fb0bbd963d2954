"""Application aggregate – pipeline stages and reducers."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeAlias

from mp_ftsearch.protocol import SortOrder

__all__ = [
    "AggregateOperation",
    "Apply",
    "Filter",
    "GroupBy",
    "Limit",
    "Reducer",
    "ReducerFunction",
    "SortBy",
]


class ReducerFunction(StrEnum):
    COUNT = "COUNT"
    COUNT_DISTINCT = "COUNT_DISTINCT"
    COUNT_DISTINCTISH = "COUNT_DISTINCTISH"
    SUM = "SUM"
    MIN = "MIN"
    MAX = "MAX"
    AVG = "AVG"
    STDDEV = "STDDEV"
    QUANTILE = "QUANTILE"
    TOLIST = "TOLIST"
    FIRST_VALUE = "FIRST_VALUE"
    RANDOM_SAMPLE = "RANDOM_SAMPLE"


@dataclass(frozen=True)
class Reducer:
    """A ``REDUCE`` clause inside a :class:`GroupBy` stage.

    ``func`` is a :class:`ReducerFunction` or, for server-side custom
    reducers, a plain string.
    """
    func: ReducerFunction | str
    args: tuple[str, ...] = ()
    name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))


@dataclass(frozen=True)
class Filter:
    expression: str


@dataclass(frozen=True)
class Limit:
    offset: int
    count: int


@dataclass(frozen=True)
class Apply:
    expression: str
    name: str


@dataclass(frozen=True)
class SortBy:
    """``SORTBY`` stage; ``properties`` keeps its declared order."""
    properties: tuple[tuple[str, SortOrder], ...]
    max: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", tuple(tuple(p) for p in self.properties))


@dataclass(frozen=True)
class GroupBy:
    fields: tuple[str, ...]
    reducers: tuple[Reducer, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))
        object.__setattr__(self, "reducers", tuple(self.reducers))


AggregateOperation: TypeAlias = Filter | Limit | Apply | SortBy | GroupBy
