"""
Search backend selection.

A provider hands out the search repository for a named index. The
Redis provider builds a thin repository per request over a shared
client; the in-memory provider keeps one mock index per name alive for
the life of the process.
"""

from typing import Dict, Optional

import redis

from hrapp.config.settings import Settings, settings as default_settings
from hrapp.mappers.base import EntityMapper
from hrapp.mocks.search_index_mock import SearchIndexMock
from hrapp.search.redis_search import RedisSearchRepository


class RedisSearchProvider:
    """Search indices stored in Redis."""

    def __init__(self, client: redis.Redis, prefix: Optional[str] = None):
        self.client = client
        self.prefix = prefix

    def for_index(self, index_name: str, mapper: EntityMapper) -> RedisSearchRepository:
        return RedisSearchRepository(self.client, index_name, mapper, prefix=self.prefix)


class InMemorySearchProvider:
    """Search indices held in process memory."""

    def __init__(self):
        self.indices: Dict[str, SearchIndexMock] = {}

    def for_index(self, index_name: str, mapper: EntityMapper) -> SearchIndexMock:
        if index_name not in self.indices:
            self.indices[index_name] = SearchIndexMock(mapper, index_name=index_name)
        return self.indices[index_name]


def create_search_provider(config: Settings = default_settings):
    """Build the provider selected by ``config.search_backend``."""
    if config.search_backend == "memory":
        return InMemorySearchProvider()
    if config.search_backend == "redis":
        from hrapp.core.redis import create_redis_client
        return RedisSearchProvider(create_redis_client(config.redis_url), prefix=config.search_index_prefix)
    raise ValueError(f"Unknown search backend: {config.search_backend}")
