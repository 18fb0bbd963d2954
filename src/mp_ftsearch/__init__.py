"""
mp_ftsearch – typed RediSearch command builders.

Import path convention::

    from mp_ftsearch.application.search import FtSearchOptions
    from mp_ftsearch.application.aggregate import FtAggregateOptions, GroupBy, Reducer
    from mp_ftsearch.application.commands import ft_search, ft_aggregate
    from mp_ftsearch.adapters.redis import SearchClient
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
