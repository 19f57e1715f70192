import logging
import time

import redis
from redis.exceptions import RedisError

from ..core.config import get_settings
from ..core.redis import get_redis_client

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Sliding Window rate limiter backed by Redis Sorted Sets.
    """

    def __init__(self, client: redis.Redis, limit: int, window_seconds: int):
        self.client = client
        self.limit = limit
        self.window_seconds = window_seconds

    def is_rate_limited(self, client_id: str) -> bool:
        """Returns True if the client has exceeded the limit."""
        key = f"rate_limit:{client_id}"
        now = time.time()
        # The start of our window
        window_start = now - self.window_seconds

        try:
            # All commands are sent in one round trip
            pipe = self.client.pipeline()

            # Drop timestamps older than the window
            pipe.zremrangebyscore(key, 0, window_start)

            # Timestamp is both the member and the score
            pipe.zadd(key, {str(now): now})

            pipe.zcard(key)

            # Expire the whole set so it cleans up after inactivity
            pipe.expire(key, self.window_seconds)

            results = pipe.execute()

            # ZCARD was the 3rd command
            request_count = results[2]

            return request_count > self.limit

        except RedisError as e:
            # Fail open: if Redis is down, let the request through
            logger.warning(f"Rate limiter unavailable, allowing request: {e}")
            return False


def get_rate_limiter() -> RateLimiter:
    settings = get_settings()
    return RateLimiter(
        get_redis_client(),
        limit=settings.rate_limit,
        window_seconds=settings.rate_window_seconds,
    )
