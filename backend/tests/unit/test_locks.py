"""Unit tests for per-space submission locks."""

import asyncio

import pytest

from app.config import Settings
from app.core.exceptions import SpaceBusyError
from app.infrastructure.locks import (
    LocalSpaceLockManager,
    RedisSpaceLockManager,
    create_lock_manager,
    lock_name,
)


class TestLockName:
    def test_space_key(self):
        assert lock_name("abc") == "space:abc:submission"

    def test_standalone_key(self):
        assert lock_name(None) == "space:standalone:submission"


class TestLocalSpaceLockManager:
    @pytest.mark.asyncio
    async def test_same_space_is_exclusive(self):
        locks = LocalSpaceLockManager(wait_seconds=0.05)

        async with locks.hold("space-1"):
            with pytest.raises(SpaceBusyError):
                async with locks.hold("space-1"):
                    pass

    @pytest.mark.asyncio
    async def test_different_spaces_do_not_contend(self):
        locks = LocalSpaceLockManager(wait_seconds=0.05)

        async with locks.hold("space-1"):
            async with locks.hold("space-2"):
                pass

    @pytest.mark.asyncio
    async def test_waiters_run_in_turn(self):
        locks = LocalSpaceLockManager(wait_seconds=1.0)
        order = []

        async def worker(name):
            async with locks.hold("space-1"):
                order.append(f"{name}-in")
                await asyncio.sleep(0.01)
                order.append(f"{name}-out")

        await asyncio.gather(worker("a"), worker("b"))

        assert order in (["a-in", "a-out", "b-in", "b-out"], ["b-in", "b-out", "a-in", "a-out"])

    @pytest.mark.asyncio
    async def test_released_after_error(self):
        locks = LocalSpaceLockManager(wait_seconds=0.05)

        with pytest.raises(ValueError):
            async with locks.hold("space-1"):
                raise ValueError("boom")

        async with locks.hold("space-1"):
            pass

    @pytest.mark.asyncio
    async def test_idle_spaces_are_forgotten(self):
        locks = LocalSpaceLockManager(wait_seconds=0.05)

        async with locks.hold("space-1"):
            assert "space:space-1:submission" in locks._locks

        assert locks._locks == {}
        assert locks._users == {}

    @pytest.mark.asyncio
    async def test_timed_out_waiter_leaves_lock_with_holder(self):
        locks = LocalSpaceLockManager(wait_seconds=0.05)

        async with locks.hold("space-1"):
            with pytest.raises(SpaceBusyError):
                async with locks.hold("space-1"):
                    pass
            assert locks._users == {"space:space-1:submission": 1}

        assert locks._locks == {}


class TestCreateLockManager:
    def test_local_backend(self):
        manager = create_lock_manager(Settings(submission_lock_backend="local"))
        assert isinstance(manager, LocalSpaceLockManager)

    def test_redis_backend_requires_client(self):
        with pytest.raises(RuntimeError):
            create_lock_manager(Settings(submission_lock_backend="redis"))

    def test_redis_backend(self):
        client = object()
        manager = create_lock_manager(Settings(submission_lock_backend="redis"), client)
        assert isinstance(manager, RedisSpaceLockManager)
        assert manager.client is client
