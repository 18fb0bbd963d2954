"""RangeBound: one end of a numeric filter range."""

from __future__ import annotations

import dataclasses
import math
from enum import StrEnum

from mp_ftsearch.kernel.types.values import WireValue, to_double, to_integer


class BoundKind(StrEnum):
    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"
    NEG_INF = "-inf"
    POS_INF = "+inf"


@dataclasses.dataclass(frozen=True)
class RangeBound:
    """A numeric bound serialised the way the server's range parser expects.

    ``inclusive(5)`` → ``5``, ``exclusive(5)`` → ``"(5"``,
    ``neg_inf()`` → ``"-inf"``, ``pos_inf()`` → ``"+inf"``.
    """

    kind: BoundKind
    value: int | float | None = None

    @classmethod
    def inclusive(cls, value: int | float) -> "RangeBound":
        return cls(BoundKind.INCLUSIVE, value)

    @classmethod
    def exclusive(cls, value: int | float) -> "RangeBound":
        return cls(BoundKind.EXCLUSIVE, value)

    @classmethod
    def neg_inf(cls) -> "RangeBound":
        return cls(BoundKind.NEG_INF)

    @classmethod
    def pos_inf(cls) -> "RangeBound":
        return cls(BoundKind.POS_INF)

    @classmethod
    def coerce(cls, bound: "RangeBound | int | float") -> "RangeBound":
        """Plain numbers are inclusive; ``±inf`` floats map to the infinity tokens."""
        if isinstance(bound, RangeBound):
            return bound
        if isinstance(bound, float) and math.isinf(bound):
            return cls.pos_inf() if bound > 0 else cls.neg_inf()
        return cls.inclusive(bound)

    def to_value(self, argument: str = "bound") -> WireValue:
        match self.kind:
            case BoundKind.NEG_INF:
                return "-inf"
            case BoundKind.POS_INF:
                return "+inf"
            case BoundKind.INCLUSIVE:
                return _number(self.value, argument)
            case BoundKind.EXCLUSIVE:
                return f"({_number(self.value, argument)}"


def _number(value: object, argument: str) -> WireValue:
    if isinstance(value, float) and math.isinf(value):
        return "+inf" if value > 0 else "-inf"
    if isinstance(value, int) and not isinstance(value, bool):
        return to_integer(value, argument)
    return to_double(value, argument)


__all__ = ["BoundKind", "RangeBound"]
