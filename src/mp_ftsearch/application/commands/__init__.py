"""Application commands – Transport port and FT.* command coroutines."""
from mp_ftsearch.application.commands.functions import (
    ft_aggregate,
    ft_aliasadd,
    ft_aliasdel,
    ft_aliasupdate,
    ft_alter,
    ft_config_get,
    ft_config_set,
    ft_create,
    ft_cursor_del,
    ft_cursor_read,
    ft_dictadd,
    ft_dictdel,
    ft_dictdump,
    ft_dropindex,
    ft_explain,
    ft_info,
    ft_list,
    ft_search,
    ft_spellcheck,
    ft_sugadd,
    ft_sugdel,
    ft_sugget,
    ft_suglen,
    ft_syndump,
    ft_synupdate,
    ft_tagvals,
)
from mp_ftsearch.application.commands.transport import Transport

__all__ = [
    "Transport",
    "ft_aggregate",
    "ft_aliasadd",
    "ft_aliasdel",
    "ft_aliasupdate",
    "ft_alter",
    "ft_config_get",
    "ft_config_set",
    "ft_create",
    "ft_cursor_del",
    "ft_cursor_read",
    "ft_dictadd",
    "ft_dictdel",
    "ft_dictdump",
    "ft_dropindex",
    "ft_explain",
    "ft_info",
    "ft_list",
    "ft_search",
    "ft_spellcheck",
    "ft_sugadd",
    "ft_sugdel",
    "ft_sugget",
    "ft_suglen",
    "ft_syndump",
    "ft_synupdate",
    "ft_tagvals",
]
