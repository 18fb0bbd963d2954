"""Application search – FT.SEARCH options and encoder."""
from mp_ftsearch.application.fields import SearchField
from mp_ftsearch.application.search.encoder import encode_search_options
from mp_ftsearch.application.search.options import (
    FtSearchOptions,
    GeoFilter,
    GeoPosition,
    GeoUnit,
    Highlight,
    NumericFilter,
    SearchSortBy,
    Summarize,
)

__all__ = [
    "FtSearchOptions",
    "GeoFilter",
    "GeoPosition",
    "GeoUnit",
    "Highlight",
    "NumericFilter",
    "SearchField",
    "SearchSortBy",
    "Summarize",
    "encode_search_options",
]
