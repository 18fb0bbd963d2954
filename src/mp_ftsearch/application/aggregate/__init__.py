"""Application aggregate – FT.AGGREGATE options, pipeline stages and encoder."""
from mp_ftsearch.application.aggregate.encoder import encode_aggregate_operation, encode_aggregate_options
from mp_ftsearch.application.aggregate.operations import (
    AggregateOperation,
    Apply,
    Filter,
    GroupBy,
    Limit,
    Reducer,
    ReducerFunction,
    SortBy,
)
from mp_ftsearch.application.aggregate.options import Cursor, FtAggregateOptions, Load, LoadAll, LoadFields

__all__ = [
    "AggregateOperation",
    "Apply",
    "Cursor",
    "Filter",
    "FtAggregateOptions",
    "GroupBy",
    "Limit",
    "Load",
    "LoadAll",
    "LoadFields",
    "Reducer",
    "ReducerFunction",
    "SortBy",
    "encode_aggregate_operation",
    "encode_aggregate_options",
]
