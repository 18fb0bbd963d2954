"""Application aggregate – FT.AGGREGATE argument encoder.

Stages are emitted strictly in pipeline order: the server applies each one
to the output of the previous one.
"""
from __future__ import annotations

from mp_ftsearch.application.aggregate.operations import (
    AggregateOperation,
    Apply,
    Filter,
    GroupBy,
    Limit,
    SortBy,
)
from mp_ftsearch.application.aggregate.options import FtAggregateOptions, LoadAll, LoadFields
from mp_ftsearch.application.fields import encode_fields
from mp_ftsearch.application.params import encode_dialect, encode_params
from mp_ftsearch.kernel.types import WireValue, to_integer, to_unsigned
from mp_ftsearch.protocol import Keyword

__all__ = ["encode_aggregate_operation", "encode_aggregate_options"]


def encode_aggregate_operation(args: list[WireValue], operation: AggregateOperation) -> None:
    """Append the tokens of a single pipeline stage."""
    match operation:
        case Filter(expression=expression):
            args.extend([Keyword.FILTER, expression])
        case Limit(offset=offset, count=count):
            args.extend([
                Keyword.LIMIT,
                to_unsigned(offset, "limit.offset"),
                to_unsigned(count, "limit.count"),
            ])
        case Apply(expression=expression, name=name):
            args.extend([Keyword.APPLY, expression, Keyword.AS, name])
        case SortBy(properties=properties, max=max_):
            args.extend([Keyword.SORTBY, len(properties)])
            for prop, order in properties:
                args.extend([prop, order])
            if max_ is not None:
                args.extend([Keyword.MAX, to_unsigned(max_, "sortby.max")])
        case GroupBy(fields=fields, reducers=reducers):
            args.extend([Keyword.GROUPBY, len(fields)])
            args.extend(fields)
            for reducer in reducers:
                args.extend([Keyword.REDUCE, reducer.func, len(reducer.args)])
                args.extend(reducer.args)
                if reducer.name is not None:
                    args.extend([Keyword.AS, reducer.name])
        case _:
            raise TypeError(f"Unknown aggregate operation: {operation!r}")


def encode_aggregate_options(args: list[WireValue], options: FtAggregateOptions) -> None:
    """Append every aggregate option in protocol order.

    ``VERBATIM``, ``LOAD``, ``TIMEOUT``, pipeline stages, ``WITHCURSOR``,
    ``PARAMS``, ``DIALECT``.
    """
    if options.verbatim:
        args.append(Keyword.VERBATIM)

    match options.load:
        case LoadAll():
            args.extend([Keyword.LOAD, Keyword.ALL])
        case LoadFields(fields=fields) if fields:
            args.extend([Keyword.LOAD, len(fields)])
            encode_fields(args, fields)

    if options.timeout is not None:
        args.extend([Keyword.TIMEOUT, to_integer(options.timeout, "timeout")])

    for operation in options.pipeline:
        encode_aggregate_operation(args, operation)

    if options.cursor is not None:
        args.append(Keyword.WITHCURSOR)
        if options.cursor.count is not None:
            args.extend([Keyword.COUNT, to_unsigned(options.cursor.count, "cursor.count")])
        if options.cursor.max_idle is not None:
            args.extend([Keyword.MAXIDLE, to_unsigned(options.cursor.max_idle, "cursor.max_idle")])

    encode_params(args, options.params)
    encode_dialect(args, options.dialect)
