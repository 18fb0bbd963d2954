"""Unit tests for the Redis adapter: no running Redis required."""
from __future__ import annotations

import asyncio
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import redis.exceptions

from mp_ftsearch.adapters.redis import RedisTransport, SearchClient
from mp_ftsearch.application.search import FtSearchOptions
from mp_ftsearch.config.settings import SearchSettings
from mp_ftsearch.kernel.errors import (
    ArgumentConversionError,
    CommandError,
    ConnectionError,
    InfrastructureError,
    UnsupportedCommandError,
)
from mp_ftsearch.protocol import Command, CommandKind
from mp_ftsearch.testing.fakes import RecordingTransport


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_client(reply: Any = b"OK") -> MagicMock:
    client = MagicMock()
    client.execute_command = AsyncMock(return_value=reply)
    client.aclose = AsyncMock()
    return client


def _search(*args: Any, dialect: int | None = None) -> Command:
    return Command(CommandKind.FT_SEARCH, tuple(args), dialect)


# ---------------------------------------------------------------------------
# RedisTransport
# ---------------------------------------------------------------------------


class TestRedisTransport:
    def test_sends_command_words_then_args(self) -> None:
        async def run() -> None:
            client = _make_client()
            transport = RedisTransport(client)
            reply = await transport.request_response(
                lambda: Command(CommandKind.FT_CONFIG_GET, ("TIMEOUT",))
            )
            assert reply == b"OK"
            client.execute_command.assert_awaited_once_with("FT.CONFIG", "GET", "TIMEOUT")
        asyncio.run(run())

    def test_builder_failure_sends_nothing(self) -> None:
        async def run() -> None:
            client = _make_client()
            transport = RedisTransport(client)

            def build() -> Command:
                raise ArgumentConversionError("limit.offset", 2**64, "outside the signed 64-bit range")

            with pytest.raises(ArgumentConversionError):
                await transport.request_response(build)
            client.execute_command.assert_not_awaited()
        asyncio.run(run())

    def test_default_dialect_appended_when_absent(self) -> None:
        async def run() -> None:
            client = _make_client()
            transport = RedisTransport(client, default_dialect=2)
            await transport.request_response(lambda: _search("idx", "*"))
            client.execute_command.assert_awaited_once_with("FT.SEARCH", "idx", "*", "DIALECT", 2)
        asyncio.run(run())

    def test_explicit_dialect_wins(self) -> None:
        async def run() -> None:
            client = _make_client()
            transport = RedisTransport(client, default_dialect=2)
            await transport.request_response(lambda: _search("idx", "*", "DIALECT", 3, dialect=3))
            client.execute_command.assert_awaited_once_with("FT.SEARCH", "idx", "*", "DIALECT", 3)
        asyncio.run(run())

    def test_default_dialect_skips_other_commands(self) -> None:
        async def run() -> None:
            client = _make_client()
            transport = RedisTransport(client, default_dialect=2)
            await transport.request_response(lambda: Command(CommandKind.FT_INFO, ("idx",)))
            client.execute_command.assert_awaited_once_with("FT.INFO", "idx")
        asyncio.run(run())

    def test_response_error_maps_to_command_error(self) -> None:
        async def run() -> None:
            client = _make_client()
            client.execute_command = AsyncMock(side_effect=redis.exceptions.ResponseError("Unknown Index name"))
            transport = RedisTransport(client)
            with pytest.raises(CommandError) as exc_info:
                await transport.request_response(lambda: Command(CommandKind.FT_INFO, ("idx",)))
            assert exc_info.value.command == "FT.INFO"
            assert "Unknown Index name" in exc_info.value.message
        asyncio.run(run())

    def test_connection_error_maps(self) -> None:
        async def run() -> None:
            client = _make_client()
            client.execute_command = AsyncMock(side_effect=redis.exceptions.ConnectionError("refused"))
            transport = RedisTransport(client, resource="redis://db:6379")
            with pytest.raises(ConnectionError) as exc_info:
                await transport.request_response(lambda: Command(CommandKind.FT_LIST, ()))
            assert exc_info.value.resource == "redis://db:6379"
        asyncio.run(run())

    def test_timeout_maps_to_connection_error(self) -> None:
        async def run() -> None:
            client = _make_client()
            client.execute_command = AsyncMock(side_effect=redis.exceptions.TimeoutError("slow"))
            transport = RedisTransport(client)
            with pytest.raises(ConnectionError):
                await transport.request_response(lambda: Command(CommandKind.FT_LIST, ()))
        asyncio.run(run())

    def test_other_redis_error_maps_to_infrastructure_error(self) -> None:
        async def run() -> None:
            client = _make_client()
            client.execute_command = AsyncMock(side_effect=redis.exceptions.RedisError("odd"))
            transport = RedisTransport(client)
            with pytest.raises(InfrastructureError):
                await transport.request_response(lambda: Command(CommandKind.FT_LIST, ()))
        asyncio.run(run())

    def test_cancelled_before_slot_never_builds(self) -> None:
        async def run() -> None:
            release = asyncio.Event()

            async def slow(*_: Any) -> bytes:
                await release.wait()
                return b"OK"

            client = _make_client()
            client.execute_command = AsyncMock(side_effect=slow)
            transport = RedisTransport(client, max_in_flight=1)

            first = asyncio.create_task(
                transport.request_response(lambda: Command(CommandKind.FT_INFO, ("a",)))
            )
            await asyncio.sleep(0)

            built: list[int] = []

            def build() -> Command:
                built.append(1)
                return Command(CommandKind.FT_INFO, ("b",))

            second = asyncio.create_task(transport.request_response(build))
            await asyncio.sleep(0)
            second.cancel()
            with pytest.raises(asyncio.CancelledError):
                await second

            release.set()
            assert await first == b"OK"
            assert built == []
            client.execute_command.assert_awaited_once_with("FT.INFO", "a")
        asyncio.run(run())

    def test_close_calls_aclose(self) -> None:
        async def run() -> None:
            client = _make_client()
            await RedisTransport(client).close()
            client.aclose.assert_awaited_once()
        asyncio.run(run())

    def test_from_settings(self) -> None:
        client = _make_client()
        settings = SearchSettings(url="redis://search:6380/1", default_dialect=2, max_in_flight=4)
        with patch("redis.asyncio.from_url", return_value=client) as from_url:
            transport = RedisTransport.from_settings(settings)
        from_url.assert_called_once_with("redis://search:6380/1", decode_responses=False)

        async def run() -> None:
            await transport.request_response(lambda: _search("idx", "*"))
            client.execute_command.assert_awaited_once_with("FT.SEARCH", "idx", "*", "DIALECT", 2)
        asyncio.run(run())


# ---------------------------------------------------------------------------
# SearchClient
# ---------------------------------------------------------------------------


class TestSearchClient:
    def test_search_delegates_to_command(self) -> None:
        async def run() -> None:
            transport = RecordingTransport([0])
            client = SearchClient(transport)
            reply = await client.search("idx", "*", FtSearchOptions(nocontent=True))
            assert reply == [0]
            assert transport.last.args == ("idx", "*", "NOCONTENT")
        asyncio.run(run())

    def test_dropindex_and_sugget(self) -> None:
        async def run() -> None:
            transport = RecordingTransport()
            client = SearchClient(transport)
            await client.dropindex("idx", dd=True)
            await client.sugget("ac", "he", withscores=True)
            assert [c.kind for c in transport.sent] == [CommandKind.FT_DROPINDEX, CommandKind.FT_SUGGET]
            assert transport.sent[1].args == ("ac", "he", "WITHSCORES")
        asyncio.run(run())

    def test_create_is_unsupported(self) -> None:
        async def run() -> None:
            transport = RecordingTransport()
            with pytest.raises(UnsupportedCommandError):
                await SearchClient(transport).create("idx")
            assert transport.sent == []
        asyncio.run(run())

    def test_context_manager_closes_redis_transport(self) -> None:
        async def run() -> None:
            client = _make_client()
            async with SearchClient(RedisTransport(client)) as search:
                await search.list_indexes()
            client.execute_command.assert_awaited_once_with("FT._LIST")
            client.aclose.assert_awaited_once()
        asyncio.run(run())

    def test_close_without_transport_close(self) -> None:
        asyncio.run(SearchClient(RecordingTransport()).close())

    def test_from_settings_uses_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FTSEARCH_URL", "redis://env-host:6379/0")
        client = _make_client()
        with patch("redis.asyncio.from_url", return_value=client) as from_url:
            SearchClient.from_settings(configure_logs=False)
        from_url.assert_called_once_with("redis://env-host:6379/0", decode_responses=False)

    def test_from_settings_configures_logging(self) -> None:
        settings = SearchSettings(log_level="debug", json_logs=False)
        with (
            patch("redis.asyncio.from_url", return_value=_make_client()),
            patch("mp_ftsearch.adapters.redis.client.configure_logging") as configure,
        ):
            SearchClient.from_settings(settings)
        configure.assert_called_once_with(10, json=False)

    def test_from_settings_can_leave_logging_alone(self) -> None:
        with (
            patch("redis.asyncio.from_url", return_value=_make_client()),
            patch("mp_ftsearch.adapters.redis.client.configure_logging") as configure,
        ):
            SearchClient.from_settings(SearchSettings(), configure_logs=False)
        configure.assert_not_called()
