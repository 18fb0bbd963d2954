"""Redis adapter – RedisTransport."""
from __future__ import annotations

import asyncio
from typing import Any

from mp_ftsearch.config.settings import SearchSettings
from mp_ftsearch.kernel.errors import CommandError, ConnectionError, InfrastructureError
from mp_ftsearch.observability.logging import get_logger
from mp_ftsearch.protocol import Command, CommandBuilder


def _require_redis() -> Any:
    try:
        import redis
        import redis.asyncio
        import redis.exceptions
        return redis
    except ImportError as exc:
        raise ImportError("Install 'mp-ftsearch[redis]' to use the Redis adapter") from exc


class RedisTransport:
    """:class:`~mp_ftsearch.application.commands.Transport` over ``redis.asyncio``.

    A command is built only after an in-flight slot has been acquired, so a
    call cancelled while waiting never builds and never sends.  When
    *default_dialect* is set it is appended to dialect-aware commands whose
    builder did not emit one.
    """

    def __init__(
        self,
        client: Any,
        *,
        max_in_flight: int = 64,
        default_dialect: int | None = None,
        resource: str = "redis",
    ) -> None:
        self._redis = _require_redis()
        self._client = client
        self._slots = asyncio.Semaphore(max_in_flight)
        self._default_dialect = default_dialect
        self._resource = resource
        self._log = get_logger(__name__, resource=resource)

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> "RedisTransport":
        redis = _require_redis()
        client = redis.asyncio.from_url(url, decode_responses=False)
        return cls(client, resource=url, **kwargs)

    @classmethod
    def from_settings(cls, settings: SearchSettings) -> "RedisTransport":
        return cls.from_url(
            settings.url,
            max_in_flight=settings.max_in_flight,
            default_dialect=settings.dialect,
        )

    def _prepare(self, build: CommandBuilder) -> Command:
        try:
            command = build()
        except Exception as exc:
            self._log.warning("ft_command_failed", stage="build", error=repr(exc))
            raise
        if (
            self._default_dialect is not None
            and command.accepts_dialect
            and command.dialect is None
        ):
            command = command.with_dialect(self._default_dialect)
        self._log.debug("ft_command_built", command=command.kind.value, args=len(command.args))
        return command

    async def request_response(self, build: CommandBuilder) -> Any:
        errors = self._redis.exceptions
        async with self._slots:
            command = self._prepare(build)
            try:
                return await self._client.execute_command(*command.to_wire())
            except (errors.ConnectionError, errors.TimeoutError) as exc:
                self._log.warning("ft_command_failed", stage="send", command=command.kind.value, error=repr(exc))
                raise ConnectionError(self._resource, cause=exc) from exc
            except errors.ResponseError as exc:
                self._log.warning("ft_command_failed", stage="reply", command=command.kind.value, error=str(exc))
                raise CommandError(command.kind.value, str(exc), cause=exc) from exc
            except errors.RedisError as exc:
                self._log.warning("ft_command_failed", stage="send", command=command.kind.value, error=repr(exc))
                raise InfrastructureError(f"{command.kind.value} failed: {exc}", cause=exc) from exc

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisTransport"]
