"""Per-space locks around the check-then-insert submission sequence.

Two submissions for the same space must not both pass the conflict check
before either is written. Submissions for different spaces never contend.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Optional, Protocol

import redis.asyncio as redis
from redis.exceptions import LockError

from app.config import Settings
from app.core.exceptions import SpaceBusyError

logger = logging.getLogger(__name__)

STANDALONE_KEY = "standalone"


def lock_name(space_id: Optional[str]) -> str:
    return f"space:{space_id or STANDALONE_KEY}:submission"


class SpaceLockManager(Protocol):
    def hold(self, space_id: Optional[str]) -> AsyncContextManager[None]:
        ...


class LocalSpaceLockManager:
    """In-process locks, one asyncio.Lock per space.

    A space's entry lives only while someone holds or waits for it.
    """

    def __init__(self, wait_seconds: float):
        self.wait_seconds = wait_seconds
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, space_id: Optional[str]) -> AsyncIterator[None]:
        name = lock_name(space_id)
        lock = self._locks.setdefault(name, asyncio.Lock())
        self._users[name] = self._users.get(name, 0) + 1
        try:
            try:
                async with asyncio.timeout(self.wait_seconds):
                    await lock.acquire()
            except TimeoutError as e:
                logger.warning(f"Timed out waiting for {name}")
                raise SpaceBusyError(space_id) from e
            try:
                yield
            finally:
                lock.release()
        finally:
            self._users[name] -= 1
            if not self._users[name]:
                del self._users[name]
                del self._locks[name]


class RedisSpaceLockManager:
    """Redis locks, shared by every worker process."""

    def __init__(self, client: redis.Redis, timeout_seconds: float, wait_seconds: float):
        self.client = client
        self.timeout_seconds = timeout_seconds
        self.wait_seconds = wait_seconds

    @asynccontextmanager
    async def hold(self, space_id: Optional[str]) -> AsyncIterator[None]:
        name = lock_name(space_id)
        lock = self.client.lock(
            name,
            timeout=self.timeout_seconds,
            blocking_timeout=self.wait_seconds,
        )
        acquired = await lock.acquire()
        if not acquired:
            logger.warning(f"Timed out waiting for {name}")
            raise SpaceBusyError(space_id)
        try:
            yield
        finally:
            try:
                await lock.release()
            except LockError as e:
                logger.warning(f"Lock {name} expired before release: {e}")


def create_lock_manager(settings: Settings, client: Optional[redis.Redis] = None) -> SpaceLockManager:
    if settings.submission_lock_backend == "redis":
        if client is None:
            raise RuntimeError("Redis lock backend selected but no Redis client configured")
        return RedisSpaceLockManager(
            client,
            timeout_seconds=settings.submission_lock_timeout_seconds,
            wait_seconds=settings.submission_lock_wait_seconds,
        )
    return LocalSpaceLockManager(wait_seconds=settings.submission_lock_wait_seconds)
