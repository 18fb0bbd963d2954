"""Application aggregate – FtAggregateOptions."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias

from mp_ftsearch.application.aggregate.operations import AggregateOperation
from mp_ftsearch.application.fields import SearchField

__all__ = ["Cursor", "FtAggregateOptions", "Load", "LoadAll", "LoadFields"]


@dataclass(frozen=True)
class LoadAll:
    """``LOAD *``"""


@dataclass(frozen=True)
class LoadFields:
    """``LOAD N field [AS alias] ...``; an empty list loads nothing."""
    fields: tuple[SearchField, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))


Load: TypeAlias = LoadAll | LoadFields


@dataclass(frozen=True)
class Cursor:
    count: int | None = None
    max_idle: int | None = None


@dataclass(frozen=True)
class FtAggregateOptions:
    """Options for ``FT.AGGREGATE``; ``pipeline`` stages are emitted in order."""

    verbatim: bool = False
    load: Load | None = None
    timeout: int | None = None
    pipeline: tuple[AggregateOperation, ...] = ()
    cursor: Cursor | None = None
    params: Mapping[str, Any] = field(default_factory=dict)
    dialect: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "pipeline", tuple(self.pipeline))
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
