import json
import logging
import time
import uuid
from typing import List

import redis
from redis.exceptions import RedisError

from ..core.config import get_settings
from ..core.exceptions import ReviewNotFound, ReviewStorageUnavailable
from ..core.redis import get_redis_client
from ..schemas.resume import ResumeReview, ResumeReviewCreate

logger = logging.getLogger(__name__)

REVIEW_KEY_PREFIX = "resume_review:"
REVIEW_INDEX_KEY = "resume_reviews"


class ReviewStore:
    """
    Saved resume analyses, kept in Redis so a user can come back to them.

    Each review is a JSON string under its own key with a TTL; a sorted set
    scored by creation time keeps them listable newest first.
    """

    def __init__(self, client: redis.Redis, ttl_seconds: int):
        self.client = client
        self.ttl_seconds = ttl_seconds

    def save(self, payload: ResumeReviewCreate) -> ResumeReview:
        review = ResumeReview(
            id=uuid.uuid4().hex,
            created_at=time.time(),
            job_description=payload.job_description,
            analysis=payload.analysis,
        )

        try:
            pipe = self.client.pipeline()
            pipe.setex(
                f"{REVIEW_KEY_PREFIX}{review.id}",
                self.ttl_seconds,
                review.model_dump_json(by_alias=True),
            )
            pipe.zadd(REVIEW_INDEX_KEY, {review.id: review.created_at})
            pipe.execute()
        except RedisError as e:
            logger.error(f"Failed to save resume review: {e}")
            raise ReviewStorageUnavailable() from e

        logger.info(f"Saved resume review {review.id}")
        return review

    def get(self, review_id: str) -> ResumeReview:
        try:
            data = self.client.get(f"{REVIEW_KEY_PREFIX}{review_id}")
        except RedisError as e:
            logger.error(f"Failed to load resume review {review_id}: {e}")
            raise ReviewStorageUnavailable() from e

        if not data:
            raise ReviewNotFound()

        return ResumeReview.model_validate(json.loads(data))

    def list_recent(self, limit: int = 20) -> List[ResumeReview]:
        try:
            ids = self.client.zrevrange(REVIEW_INDEX_KEY, 0, limit - 1)
            if not ids:
                return []
            values = self.client.mget([f"{REVIEW_KEY_PREFIX}{i}" for i in ids])
        except RedisError as e:
            logger.error(f"Failed to list resume reviews: {e}")
            raise ReviewStorageUnavailable() from e

        reviews = []
        expired = []
        for review_id, data in zip(ids, values):
            if data:
                reviews.append(ResumeReview.model_validate(json.loads(data)))
            else:
                expired.append(review_id)

        if expired:
            # Review keys expire on their own; the index has to be pruned
            try:
                self.client.zrem(REVIEW_INDEX_KEY, *expired)
            except RedisError as e:
                logger.warning(f"Failed to prune expired reviews: {e}")

        return reviews


def get_review_store() -> ReviewStore:
    return ReviewStore(get_redis_client(), ttl_seconds=get_settings().review_ttl_seconds)
