"""
Redis connection management.

Redis backs the search index. One client is shared by every
request; redis-py pools connections internally.
"""

import redis
from typing import Optional

from hrapp.config.settings import settings


def create_redis_client(url: Optional[str] = None) -> redis.Redis:
    """
    Create a Redis client for the search index.

    Responses are decoded to strings, which the search repositories
    rely on when comparing stored terms and ids.
    """
    return redis.from_url(
        url or settings.redis_url,
        decode_responses=True,  # Automatically decode responses to strings
        socket_connect_timeout=5,
        socket_timeout=5
    )

