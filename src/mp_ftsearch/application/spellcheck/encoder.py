"""Application spellcheck – FT.SPELLCHECK argument encoder."""
from __future__ import annotations

from mp_ftsearch.application.params import encode_dialect
from mp_ftsearch.application.spellcheck.terms import Exclude, Include, SpellcheckTerms
from mp_ftsearch.kernel.types import WireValue, to_text, to_unsigned
from mp_ftsearch.protocol import Keyword

__all__ = ["encode_spellcheck"]


def encode_spellcheck(
    index: str,
    query: str,
    distance: int | None = None,
    terms: SpellcheckTerms | None = None,
    dialect: int | None = None,
) -> list[WireValue]:
    """``index query [DISTANCE d] [TERMS INCLUDE|EXCLUDE dict term...] [DIALECT d]``"""
    args: list[WireValue] = [to_text(index, "index"), to_text(query, "query")]
    if distance is not None:
        args.extend([Keyword.DISTANCE, to_unsigned(distance, "distance")])

    if terms is not None:
        match terms:
            case Include():
                mode = Keyword.INCLUDE
            case Exclude():
                mode = Keyword.EXCLUDE
            case _:
                raise TypeError(f"Unknown spellcheck terms: {terms!r}")
        args.extend([Keyword.TERMS, mode, terms.dictionary])
        args.extend(terms.terms)

    encode_dialect(args, dialect)
    return args
