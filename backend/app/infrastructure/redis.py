"""Redis connection management."""

import redis.asyncio as redis

from app.config import Settings


def create_redis(settings: Settings) -> redis.Redis:
    return redis.from_url(settings.redis_url, decode_responses=True)


async def close_redis(client: redis.Redis | None) -> None:
    if client:
        await client.aclose()
