"""Redis adapter – redis.asyncio transport and SearchClient facade."""
from mp_ftsearch.adapters.redis.client import SearchClient
from mp_ftsearch.adapters.redis.transport import RedisTransport

__all__ = ["RedisTransport", "SearchClient"]
