"""Application commands – one coroutine per ``FT.*`` command.

Each function hands a deferred builder to the transport and decodes the
reply.  Building happens inside the transport, right before sending, so an
argument that cannot be converted fails the call without any network I/O.
"""
from __future__ import annotations

from typing import Any, Callable, Sequence

from mp_ftsearch.application.aggregate import FtAggregateOptions, encode_aggregate_options
from mp_ftsearch.application.commands.transport import Transport
from mp_ftsearch.application.search import FtSearchOptions, encode_search_options
from mp_ftsearch.application.spellcheck import SpellcheckTerms, encode_spellcheck
from mp_ftsearch.application.suggest import encode_sugadd, encode_sugget
from mp_ftsearch.kernel.errors import UnsupportedCommandError
from mp_ftsearch.kernel.types import WireValue, to_integer, to_text, to_unsigned, to_value
from mp_ftsearch.protocol import Command, CommandKind, Keyword, decode_reply

__all__ = [
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


async def _execute(
    transport: Transport,
    kind: CommandKind,
    build_args: Callable[[], list[WireValue]],
    dialect: int | None = None,
) -> Any:
    def build() -> Command:
        return Command(kind, tuple(build_args()), dialect)

    frame = await transport.request_response(build)
    return decode_reply(frame, kind.value)


def _texts(**values: Any) -> list[WireValue]:
    return [to_text(value, argument) for argument, value in values.items()]


def _texts_of(values: Sequence[str], argument: str) -> list[WireValue]:
    return [to_text(value, argument) for value in values]


async def ft_list(transport: Transport) -> Any:
    return await _execute(transport, CommandKind.FT_LIST, list)


async def ft_aggregate(
    transport: Transport,
    index: str,
    query: str,
    options: FtAggregateOptions | None = None,
) -> Any:
    options = options or FtAggregateOptions()

    def build_args() -> list[WireValue]:
        args: list[WireValue] = _texts(index=index, query=query)
        encode_aggregate_options(args, options)
        return args

    return await _execute(transport, CommandKind.FT_AGGREGATE, build_args, options.dialect)


async def ft_search(
    transport: Transport,
    index: str,
    query: str,
    options: FtSearchOptions | None = None,
) -> Any:
    options = options or FtSearchOptions()

    def build_args() -> list[WireValue]:
        args: list[WireValue] = _texts(index=index, query=query)
        encode_search_options(args, options)
        return args

    return await _execute(transport, CommandKind.FT_SEARCH, build_args, options.dialect)


def _unsupported(command: CommandKind) -> Callable[[], list[WireValue]]:
    def build_args() -> list[WireValue]:
        raise UnsupportedCommandError(
            command.value,
            f"{command.value} index/schema encoding is not implemented",
        )

    return build_args


async def ft_create(transport: Transport, index: str, options: Any = None, schema: Any = None) -> Any:  # noqa: ARG001
    """Always fails before sending: index/schema encoding is not implemented."""
    return await _execute(transport, CommandKind.FT_CREATE, _unsupported(CommandKind.FT_CREATE))


async def ft_alter(transport: Transport, index: str, options: Any = None) -> Any:  # noqa: ARG001
    """Always fails before sending: index/schema encoding is not implemented."""
    return await _execute(transport, CommandKind.FT_ALTER, _unsupported(CommandKind.FT_ALTER))


async def ft_aliasadd(transport: Transport, alias: str, index: str) -> Any:
    return await _execute(transport, CommandKind.FT_ALIASADD, lambda: _texts(alias=alias, index=index))


async def ft_aliasdel(transport: Transport, alias: str) -> Any:
    return await _execute(transport, CommandKind.FT_ALIASDEL, lambda: _texts(alias=alias))


async def ft_aliasupdate(transport: Transport, alias: str, index: str) -> Any:
    return await _execute(transport, CommandKind.FT_ALIASUPDATE, lambda: _texts(alias=alias, index=index))


async def ft_config_get(transport: Transport, option: str) -> Any:
    return await _execute(transport, CommandKind.FT_CONFIG_GET, lambda: _texts(option=option))


async def ft_config_set(transport: Transport, option: str, value: Any) -> Any:
    return await _execute(
        transport, CommandKind.FT_CONFIG_SET, lambda: [to_text(option, "option"), to_value(value, "value")]
    )


async def ft_cursor_del(transport: Transport, index: str, cursor: int | str) -> Any:
    return await _execute(
        transport, CommandKind.FT_CURSOR_DEL, lambda: [to_text(index, "index"), to_value(cursor, "cursor")]
    )


async def ft_cursor_read(
    transport: Transport,
    index: str,
    cursor: int | str,
    count: int | None = None,
) -> Any:
    def build_args() -> list[WireValue]:
        args: list[WireValue] = [to_text(index, "index"), to_value(cursor, "cursor")]
        if count is not None:
            args.extend([Keyword.COUNT, to_unsigned(count, "count")])
        return args

    return await _execute(transport, CommandKind.FT_CURSOR_READ, build_args)


async def ft_dictadd(transport: Transport, dictionary: str, terms: Sequence[str]) -> Any:
    terms = tuple(terms)
    return await _execute(
        transport, CommandKind.FT_DICTADD, lambda: [to_text(dictionary, "dictionary"), *_texts_of(terms, "term")]
    )


async def ft_dictdel(transport: Transport, dictionary: str, terms: Sequence[str]) -> Any:
    terms = tuple(terms)
    return await _execute(
        transport, CommandKind.FT_DICTDEL, lambda: [to_text(dictionary, "dictionary"), *_texts_of(terms, "term")]
    )


async def ft_dictdump(transport: Transport, dictionary: str) -> Any:
    return await _execute(transport, CommandKind.FT_DICTDUMP, lambda: _texts(dictionary=dictionary))


async def ft_dropindex(transport: Transport, index: str, dd: bool = False) -> Any:
    """Drop *index*; ``dd=True`` also deletes the indexed documents."""
    def build_args() -> list[WireValue]:
        args = _texts(index=index)
        if dd:
            args.append(Keyword.DD)
        return args

    return await _execute(transport, CommandKind.FT_DROPINDEX, build_args)


async def ft_explain(
    transport: Transport,
    index: str,
    query: str,
    dialect: int | None = None,
) -> Any:
    def build_args() -> list[WireValue]:
        args: list[WireValue] = _texts(index=index, query=query)
        if dialect is not None:
            args.extend([Keyword.DIALECT, to_integer(dialect, "dialect")])
        return args

    return await _execute(transport, CommandKind.FT_EXPLAIN, build_args, dialect)


async def ft_info(transport: Transport, index: str) -> Any:
    return await _execute(transport, CommandKind.FT_INFO, lambda: _texts(index=index))


async def ft_spellcheck(
    transport: Transport,
    index: str,
    query: str,
    distance: int | None = None,
    terms: SpellcheckTerms | None = None,
    dialect: int | None = None,
) -> Any:
    return await _execute(
        transport,
        CommandKind.FT_SPELLCHECK,
        lambda: encode_spellcheck(index, query, distance, terms, dialect),
        dialect,
    )


async def ft_sugadd(
    transport: Transport,
    key: str,
    string: str,
    score: float,
    incr: bool = False,
    payload: bytes | None = None,
) -> Any:
    return await _execute(
        transport,
        CommandKind.FT_SUGADD,
        lambda: encode_sugadd(key, string, score, incr, payload),
    )


async def ft_sugdel(transport: Transport, key: str, string: str) -> Any:
    return await _execute(transport, CommandKind.FT_SUGDEL, lambda: _texts(key=key, string=string))


async def ft_sugget(
    transport: Transport,
    key: str,
    prefix: str,
    fuzzy: bool = False,
    withscores: bool = False,
    withpayloads: bool = False,
    max: int | None = None,  # noqa: A002
) -> Any:
    return await _execute(
        transport,
        CommandKind.FT_SUGGET,
        lambda: encode_sugget(key, prefix, fuzzy, withscores, withpayloads, max),
    )


async def ft_suglen(transport: Transport, key: str) -> Any:
    return await _execute(transport, CommandKind.FT_SUGLEN, lambda: _texts(key=key))


async def ft_syndump(transport: Transport, index: str) -> Any:
    return await _execute(transport, CommandKind.FT_SYNDUMP, lambda: _texts(index=index))


async def ft_synupdate(
    transport: Transport,
    index: str,
    synonym_group_id: str,
    terms: Sequence[str],
    skipinitialscan: bool = False,
) -> Any:
    terms = tuple(terms)

    def build_args() -> list[WireValue]:
        args = _texts(index=index, synonym_group_id=synonym_group_id)
        if skipinitialscan:
            args.append(Keyword.SKIPINITIALSCAN)
        args.extend(_texts_of(terms, "term"))
        return args

    return await _execute(transport, CommandKind.FT_SYNUPDATE, build_args)


async def ft_tagvals(transport: Transport, index: str, field_name: str) -> Any:
    return await _execute(transport, CommandKind.FT_TAGVALS, lambda: _texts(index=index, field=field_name))
