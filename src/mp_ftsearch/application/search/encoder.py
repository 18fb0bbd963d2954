"""Application search – FT.SEARCH argument encoder."""
from __future__ import annotations

import math
from typing import Any

from mp_ftsearch.application.fields import encode_fields
from mp_ftsearch.application.params import encode_dialect, encode_params
from mp_ftsearch.application.search.options import FtSearchOptions, Highlight, Summarize
from mp_ftsearch.kernel.types import RangeBound, WireValue, to_bytes, to_double, to_integer, to_unsigned
from mp_ftsearch.protocol import Keyword

__all__ = ["encode_search_options"]


def _radius(value: Any, argument: str) -> WireValue:
    """Plain distance; only infinities use the protocol tokens."""
    if isinstance(value, int) and not isinstance(value, bool):
        return to_integer(value, argument)
    radius = to_double(value, argument)
    if math.isinf(radius):
        return "+inf" if radius > 0 else "-inf"
    return radius


def _encode_summarize(args: list[WireValue], summarize: Summarize) -> None:
    args.append(Keyword.SUMMARIZE)
    if summarize.fields:
        args.extend([Keyword.FIELDS, len(summarize.fields)])
        args.extend(summarize.fields)
    if summarize.frags is not None:
        args.extend([Keyword.FRAGS, to_unsigned(summarize.frags, "summarize.frags")])
    if summarize.len is not None:
        args.extend([Keyword.LEN, to_unsigned(summarize.len, "summarize.len")])
    if summarize.separator is not None:
        args.extend([Keyword.SEPARATOR, summarize.separator])


def _encode_highlight(args: list[WireValue], highlight: Highlight) -> None:
    args.append(Keyword.HIGHLIGHT)
    if highlight.fields:
        args.extend([Keyword.FIELDS, len(highlight.fields)])
        args.extend(highlight.fields)
    if highlight.tags is not None:
        open_tag, close_tag = highlight.tags
        args.extend([Keyword.TAGS, open_tag, close_tag])


def encode_search_options(args: list[WireValue], options: FtSearchOptions) -> None:
    """Append every search option in protocol order."""
    for flag, keyword in (
        (options.nocontent, Keyword.NOCONTENT),
        (options.verbatim, Keyword.VERBATIM),
        (options.nostopwords, Keyword.NOSTOPWORDS),
        (options.withscores, Keyword.WITHSCORES),
        (options.withpayloads, Keyword.WITHPAYLOADS),
        (options.withsortkeys, Keyword.WITHSORTKEYS),
    ):
        if flag:
            args.append(keyword)

    for f in options.filters:
        args.extend([
            Keyword.FILTER,
            f.attribute,
            RangeBound.coerce(f.min).to_value(f"filter.{f.attribute}.min"),
            RangeBound.coerce(f.max).to_value(f"filter.{f.attribute}.max"),
        ])
    for g in options.geofilters:
        args.extend([
            Keyword.GEOFILTER,
            g.attribute,
            to_double(g.position.longitude, f"geofilter.{g.attribute}.longitude"),
            to_double(g.position.latitude, f"geofilter.{g.attribute}.latitude"),
            _radius(g.radius, f"geofilter.{g.attribute}.radius"),
            g.unit,
        ])

    if options.inkeys:
        args.extend([Keyword.INKEYS, len(options.inkeys)])
        args.extend(options.inkeys)
    if options.infields:
        args.extend([Keyword.INFIELDS, len(options.infields)])
        args.extend(options.infields)
    if options.return_fields:
        args.extend([Keyword.RETURN, len(options.return_fields)])
        encode_fields(args, options.return_fields)

    if options.summarize is not None:
        _encode_summarize(args, options.summarize)
    if options.highlight is not None:
        _encode_highlight(args, options.highlight)

    if options.slop is not None:
        args.extend([Keyword.SLOP, to_integer(options.slop, "slop")])
    if options.timeout is not None:
        args.extend([Keyword.TIMEOUT, to_integer(options.timeout, "timeout")])
    if options.inorder:
        args.append(Keyword.INORDER)
    if options.language is not None:
        args.extend([Keyword.LANGUAGE, options.language])
    if options.expander is not None:
        args.extend([Keyword.EXPANDER, options.expander])
    if options.scorer is not None:
        args.extend([Keyword.SCORER, options.scorer])
    if options.explainscore:
        args.append(Keyword.EXPLAINSCORE)
    if options.payload is not None:
        args.extend([Keyword.PAYLOAD, to_bytes(options.payload, "payload")])

    if options.sortby is not None:
        args.extend([Keyword.SORTBY, options.sortby.attribute])
        if options.sortby.order is not None:
            args.append(options.sortby.order)
        if options.sortby.withcount:
            args.append(Keyword.WITHCOUNT)

    if options.limit is not None:
        offset, count = options.limit
        args.extend([
            Keyword.LIMIT,
            to_unsigned(offset, "limit.offset"),
            to_unsigned(count, "limit.count"),
        ])

    encode_params(args, options.params)
    encode_dialect(args, options.dialect)
