"""Kernel value types: public re-export surface.

Modules:
  values.py: WireValue and fallible scalar → token conversions
  ranges.py: RangeBound (numeric filter bounds)
"""

from mp_ftsearch.kernel.types.ranges import BoundKind, RangeBound
from mp_ftsearch.kernel.types.values import (
    INT64_MAX,
    INT64_MIN,
    WireValue,
    to_bytes,
    to_double,
    to_integer,
    to_text,
    to_unsigned,
    to_value,
)

__all__ = [
    "BoundKind",
    "INT64_MAX",
    "INT64_MIN",
    "RangeBound",
    "WireValue",
    "to_bytes",
    "to_double",
    "to_integer",
    "to_text",
    "to_unsigned",
    "to_value",
]
