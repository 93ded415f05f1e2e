"""Tests for scheduler service."""
import asyncio

import pytest

from wordquest.services.scheduler_service import SchedulerService


@pytest.mark.asyncio
async def test_schedule_runs_callback() -> None:
    """Test that a scheduled callback runs after its delay."""
    scheduler = SchedulerService()
    calls = []
    scheduler.schedule("ping", 0.01, lambda: calls.append("ping"))
    assert scheduler.is_pending("ping")

    await asyncio.sleep(0.05)
    assert calls == ["ping"]
    assert scheduler.is_pending("ping") is False


@pytest.mark.asyncio
async def test_reschedule_replaces() -> None:
    """Test that scheduling the same name replaces the earlier callback."""
    scheduler = SchedulerService()
    calls = []
    scheduler.schedule("tick", 0.01, lambda: calls.append("first"))
    scheduler.schedule("tick", 0.01, lambda: calls.append("second"))
    await asyncio.sleep(0.05)
    assert calls == ["second"]


@pytest.mark.asyncio
async def test_cancel_and_cancel_all() -> None:
    """Test that cancelled callbacks never run."""
    scheduler = SchedulerService()
    calls = []
    scheduler.schedule("a", 0.01, lambda: calls.append("a"))
    scheduler.schedule("b", 0.01, lambda: calls.append("b"))
    scheduler.schedule("c", 0.01, lambda: calls.append("c"))

    assert scheduler.cancel("a") is True
    assert scheduler.cancel("a") is False
    scheduler.cancel_all()
    assert scheduler.tasks == {}

    await asyncio.sleep(0.05)
    assert calls == []


@pytest.mark.asyncio
async def test_failing_callback_is_contained() -> None:
    """Test that an exception in a callback does not break the loop."""
    scheduler = SchedulerService()
    calls = []

    def boom():
        raise RuntimeError("boom")

    scheduler.schedule("boom", 0.01, boom)
    scheduler.schedule("after", 0.02, lambda: calls.append("after"))
    await asyncio.sleep(0.05)
    assert calls == ["after"]
