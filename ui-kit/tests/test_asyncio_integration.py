# ui-kit/tests/test_asyncio_integration.py

"""
実際の asyncio イベントループ上での動作確認。

タイミングに依存するため、待ち時間には十分な余裕を持たせている。
"""

import asyncio
from typing import List

import pytest

from uikit.debounce import bind_debounced_input
from uikit.notifications import NotificationDispatcher, NotificationSettings


def test_debounce_on_running_loop() -> None:
    async def scenario() -> List[str]:
        emitted: List[str] = []
        binding = bind_debounced_input(50, emitted.append)

        binding.update("a")
        await asyncio.sleep(0.01)
        binding.update("ab")
        await asyncio.sleep(0.01)
        binding.update("abc")
        assert emitted == []

        await asyncio.sleep(0.2)
        binding.teardown()
        return emitted

    assert asyncio.run(scenario()) == ["abc"]


def test_debounce_teardown_on_running_loop() -> None:
    async def scenario() -> List[str]:
        emitted: List[str] = []
        binding = bind_debounced_input(30, emitted.append)
        binding.update("x")
        binding.teardown()
        await asyncio.sleep(0.1)
        return emitted

    assert asyncio.run(scenario()) == []


def test_notification_auto_hide_on_running_loop() -> None:
    async def scenario() -> None:
        dispatcher = NotificationDispatcher.create(settings=NotificationSettings())
        notification_id = dispatcher.show("saved", auto_hide_duration_ms=30)
        assert notification_id in dispatcher.queue

        await asyncio.sleep(0.15)
        assert notification_id not in dispatcher.queue
        dispatcher.teardown()

    asyncio.run(scenario())


def test_scheduler_is_required_outside_event_loop() -> None:
    with pytest.raises(RuntimeError):
        bind_debounced_input(100, lambda v: None)
    with pytest.raises(RuntimeError):
        NotificationDispatcher.create(settings=NotificationSettings())
