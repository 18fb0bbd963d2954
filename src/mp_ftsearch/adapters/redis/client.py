"""Redis adapter – SearchClient facade."""
from __future__ import annotations

from typing import Any, Sequence

from mp_ftsearch.adapters.redis.transport import RedisTransport
from mp_ftsearch.application import commands
from mp_ftsearch.application.aggregate import FtAggregateOptions
from mp_ftsearch.application.commands import Transport
from mp_ftsearch.application.search import FtSearchOptions
from mp_ftsearch.application.spellcheck import SpellcheckTerms
from mp_ftsearch.config.settings import EnvSettingsLoader, SearchSettings
from mp_ftsearch.observability.logging import configure_logging


class SearchClient:
    """Every ``FT.*`` command as a method bound to one transport.

    Usage::

        client = SearchClient.from_settings()
        reply = await client.search("idx", "@title:hello", FtSearchOptions(limit=(0, 10)))
        await client.close()
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: SearchSettings | None = None,
        *,
        configure_logs: bool = True,
    ) -> "SearchClient":
        """Build a client from ``FTSEARCH_*`` settings.

        Unless ``configure_logs`` is false, the process logging is set up from
        ``log_level`` and ``json_logs`` as well.
        """
        settings = settings or EnvSettingsLoader().load(SearchSettings)
        if configure_logs:
            configure_logging(settings.level, json=settings.json_logs)
        return cls(RedisTransport.from_settings(settings))

    @property
    def transport(self) -> Transport:
        return self._transport

    async def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "SearchClient":
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    # -- querying -----------------------------------------------------------

    async def search(self, index: str, query: str, options: FtSearchOptions | None = None) -> Any:
        return await commands.ft_search(self._transport, index, query, options)

    async def aggregate(self, index: str, query: str, options: FtAggregateOptions | None = None) -> Any:
        return await commands.ft_aggregate(self._transport, index, query, options)

    async def explain(self, index: str, query: str, dialect: int | None = None) -> Any:
        return await commands.ft_explain(self._transport, index, query, dialect)

    async def spellcheck(
        self,
        index: str,
        query: str,
        distance: int | None = None,
        terms: SpellcheckTerms | None = None,
        dialect: int | None = None,
    ) -> Any:
        return await commands.ft_spellcheck(self._transport, index, query, distance, terms, dialect)

    async def cursor_read(self, index: str, cursor: int | str, count: int | None = None) -> Any:
        return await commands.ft_cursor_read(self._transport, index, cursor, count)

    async def cursor_del(self, index: str, cursor: int | str) -> Any:
        return await commands.ft_cursor_del(self._transport, index, cursor)

    # -- index management ---------------------------------------------------

    async def list_indexes(self) -> Any:
        return await commands.ft_list(self._transport)

    async def info(self, index: str) -> Any:
        return await commands.ft_info(self._transport, index)

    async def create(self, index: str, options: Any = None, schema: Any = None) -> Any:
        return await commands.ft_create(self._transport, index, options, schema)

    async def alter(self, index: str, options: Any = None) -> Any:
        return await commands.ft_alter(self._transport, index, options)

    async def dropindex(self, index: str, dd: bool = False) -> Any:
        return await commands.ft_dropindex(self._transport, index, dd)

    async def aliasadd(self, alias: str, index: str) -> Any:
        return await commands.ft_aliasadd(self._transport, alias, index)

    async def aliasdel(self, alias: str) -> Any:
        return await commands.ft_aliasdel(self._transport, alias)

    async def aliasupdate(self, alias: str, index: str) -> Any:
        return await commands.ft_aliasupdate(self._transport, alias, index)

    async def tagvals(self, index: str, field_name: str) -> Any:
        return await commands.ft_tagvals(self._transport, index, field_name)

    async def config_get(self, option: str) -> Any:
        return await commands.ft_config_get(self._transport, option)

    async def config_set(self, option: str, value: Any) -> Any:
        return await commands.ft_config_set(self._transport, option, value)

    # -- dictionaries & synonyms --------------------------------------------

    async def dictadd(self, dictionary: str, terms: Sequence[str]) -> Any:
        return await commands.ft_dictadd(self._transport, dictionary, terms)

    async def dictdel(self, dictionary: str, terms: Sequence[str]) -> Any:
        return await commands.ft_dictdel(self._transport, dictionary, terms)

    async def dictdump(self, dictionary: str) -> Any:
        return await commands.ft_dictdump(self._transport, dictionary)

    async def syndump(self, index: str) -> Any:
        return await commands.ft_syndump(self._transport, index)

    async def synupdate(
        self,
        index: str,
        synonym_group_id: str,
        terms: Sequence[str],
        skipinitialscan: bool = False,
    ) -> Any:
        return await commands.ft_synupdate(self._transport, index, synonym_group_id, terms, skipinitialscan)

    # -- suggestions --------------------------------------------------------

    async def sugadd(
        self,
        key: str,
        string: str,
        score: float,
        incr: bool = False,
        payload: bytes | None = None,
    ) -> Any:
        return await commands.ft_sugadd(self._transport, key, string, score, incr, payload)

    async def sugget(
        self,
        key: str,
        prefix: str,
        fuzzy: bool = False,
        withscores: bool = False,
        withpayloads: bool = False,
        max: int | None = None,  # noqa: A002
    ) -> Any:
        return await commands.ft_sugget(self._transport, key, prefix, fuzzy, withscores, withpayloads, max)

    async def sugdel(self, key: str, string: str) -> Any:
        return await commands.ft_sugdel(self._transport, key, string)

    async def suglen(self, key: str) -> Any:
        return await commands.ft_suglen(self._transport, key)


__all__ = ["SearchClient"]
