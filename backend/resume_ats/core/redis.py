from functools import lru_cache

import redis

from .config import get_settings


@lru_cache()
def get_redis_client() -> redis.Redis:
    settings = get_settings()
    return redis.Redis(  # reusable Redis client instance
        host=settings.redis_host,
        port=settings.redis_port,
        db=settings.redis_db,
        decode_responses=True,  # returns strings instead of bytes
        socket_connect_timeout=2,
    )
