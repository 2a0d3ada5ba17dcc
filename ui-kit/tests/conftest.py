# ui-kit/tests/conftest.py
"""
Pytest configuration for UI-kit engine tests.

- Ensures that the project root (ui-kit/) is added to sys.path
  so that `import uikit.*` works correctly in tests.
- Removes UIKIT_* environment variables so that defaults are used
  unless a test sets them explicitly.
- Provides a fake scheduler whose clock only moves when the test advances it.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, List, Tuple

import pytest


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: ui-kit/tests/conftest.py
    # parents[1] -> ui-kit/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        sys.path.insert(0, project_root_str)


_ensure_project_root_in_sys_path()


class FakeTimer:
    def __init__(self, when: float, seq: int, callback: Callable[..., Any], args: Tuple[Any, ...]) -> None:
        self.when = when
        self.seq = seq
        self.callback = callback
        self.args = args
        self.cancelled = False
        self.cancel_calls = 0

    def cancel(self) -> None:
        self.cancel_calls += 1
        self.cancelled = True


class FakeScheduler:
    """
    asyncio ループの call_later / time だけを真似た手動クロック。

    advance() で時間を進めると、期限の来たタイマーを
    (期限, 登録順) の順に発火させる。
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._seq = 0
        self.timers: List[FakeTimer] = []

    def time(self) -> float:
        return self.now

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> FakeTimer:
        timer = FakeTimer(self.now + delay, self._seq, callback, args)
        self._seq += 1
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> List[FakeTimer]:
        return [t for t in self.timers if not t.cancelled]

    def advance_ms(self, ms: float) -> None:
        target = self.now + ms / 1000.0
        while True:
            due = [t for t in self.pending if t.when <= target + 1e-9]
            if not due:
                break
            timer = min(due, key=lambda t: (t.when, t.seq))
            # 発火したタイマーは pending から外す（asyncio と同じく cancel は不要）
            self.timers.remove(timer)
            self.now = max(self.now, timer.when)
            timer.callback(*timer.args)
        self.now = target


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture(autouse=True)
def _clear_uikit_env(monkeypatch) -> None:
    for name in list(os.environ):
        if name.startswith("UIKIT_"):
            monkeypatch.delenv(name, raising=False)
