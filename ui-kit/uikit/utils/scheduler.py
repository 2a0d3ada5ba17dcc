# ui-kit/uikit/utils/scheduler.py

"""
タイマー抽象（Scheduler）の定義。

debounce / notifications はどちらも「一定時間後にコールバックを呼ぶ」だけが必要なので、
asyncio のイベントループが持つ API のうち以下の 2 つだけに依存する。

- call_later(delay_seconds, callback, *args) -> キャンセル可能なハンドル
- time() -> 単調増加する現在時刻（秒）

asyncio.AbstractEventLoop はそのままこの Protocol を満たす。
テストでは時間を手動で進める偽のスケジューラを差し込む。
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Optional, Protocol


class TimerHandle(Protocol):
    """キャンセル可能なタイマーハンドル（asyncio.TimerHandle 互換）。"""

    def cancel(self) -> None:  # pragma: no cover - Protocol
        ...


class Scheduler(Protocol):
    """
    単一スレッド・協調的なタイマー実行環境。

    同じ期限のタイマーは登録順（FIFO）に発火すること。
    """

    def call_later(
        self, delay: float, callback: Callable[..., Any], *args: Any
    ) -> TimerHandle:  # pragma: no cover - Protocol
        ...

    def time(self) -> float:  # pragma: no cover - Protocol
        ...


def resolve_scheduler(scheduler: Optional[Scheduler] = None) -> Scheduler:
    """
    明示的に渡された Scheduler、なければ実行中のイベントループを返す。

    イベントループ外から scheduler なしで呼ばれた場合は RuntimeError
    （asyncio.get_running_loop() と同じ挙動）。
    """
    if scheduler is not None:
        return scheduler
    return asyncio.get_running_loop()


def ms_to_seconds(ms: int) -> float:
    return ms / 1000.0
