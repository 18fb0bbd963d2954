"""Application spellcheck – custom dictionary term inclusion / exclusion."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

__all__ = ["Exclude", "Include", "SpellcheckTerms"]


@dataclass(frozen=True)
class Include:
    dictionary: str
    terms: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", tuple(self.terms))


@dataclass(frozen=True)
class Exclude:
    dictionary: str
    terms: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", tuple(self.terms))


SpellcheckTerms: TypeAlias = Include | Exclude
