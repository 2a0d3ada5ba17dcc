# ui-kit/uikit/debounce/engine.py

"""
入力値の debounce エンジン本体。

短時間に連続する update() を 1 回の遅延 emit にまとめる。

- update(): 最新値を記録し、保留中のタイマーを取り消して張り直す
- flush(): 保留中の emit があれば待たずに即時 emit する（クリア操作用）
- teardown(): 保留中のタイマーを取り消し、以降の update/flush を無効化する

window_ms == 0 の場合はタイマーを使わず、update() の中で同期的に emit する。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from uikit.utils.scheduler import Scheduler, TimerHandle, ms_to_seconds, resolve_scheduler

from .config import get_debounce_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class DebounceState(Generic[T]):
    """
    1 つの入力バインディングが持つ debounce 状態。

    pending_timer は常に高々 1 つ。
    """

    window_ms: int
    last_raw_value: Optional[T] = None
    last_emitted_value: Optional[T] = None
    pending_timer: Optional[TimerHandle] = None
    emit_count: int = 0


class DebounceEngine(Generic[T]):
    """
    1 入力分の debounce を担当するエンジン。

    バインディングごとに独立したインスタンスを作るため、
    あるバインディングへの update が別のバインディングの emit を起こすことはない。
    """

    def __init__(
        self,
        window_ms: int,
        on_settled: Callable[[T], None],
        *,
        scheduler: Optional[Scheduler] = None,
        distinct: bool = False,
    ) -> None:
        # 負の window は 0（同期 emit）として扱う
        self._state: DebounceState[T] = DebounceState(window_ms=max(0, int(window_ms)))
        self._on_settled = on_settled
        self._distinct = distinct
        self._closed = False
        # window_ms == 0 ならタイマーは不要なのでループも要求しない
        self._scheduler: Optional[Scheduler] = (
            resolve_scheduler(scheduler) if self._state.window_ms > 0 else scheduler
        )

    # ------------------------------------------------------------------
    # 参照用プロパティ
    # ------------------------------------------------------------------
    @property
    def state(self) -> DebounceState[T]:
        return self._state

    @property
    def window_ms(self) -> int:
        return self._state.window_ms

    @property
    def has_pending(self) -> bool:
        return self._state.pending_timer is not None

    @property
    def is_torn_down(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # 公開 API
    # ------------------------------------------------------------------
    def update(self, raw_value: T) -> None:
        """
        新しい値を記録し、静止期間（window_ms）後の emit を予約し直す。

        teardown 後は何もしない。
        """
        if self._closed:
            return

        self._state.last_raw_value = raw_value
        self._cancel_pending()

        if self._state.window_ms == 0:
            self._emit(raw_value)
            return

        self._state.pending_timer = self._scheduler.call_later(
            ms_to_seconds(self._state.window_ms), self._on_timer, raw_value
        )

    def flush(self) -> None:
        """
        保留中の emit があれば、タイマーを取り消して last_raw_value を即時 emit する。

        保留中の emit がない（すでに確定済み）場合は何もしない。
        """
        if self._closed or self._state.pending_timer is None:
            return

        self._cancel_pending()
        self._emit(self._state.last_raw_value)

    def teardown(self) -> None:
        """保留中のタイマーを取り消す。以降 emit は一切発生しない。"""
        if self._closed:
            return
        self._cancel_pending()
        self._closed = True
        logger.debug("Debounce binding torn down (emitted %d times).", self._state.emit_count)

    # ------------------------------------------------------------------
    # 内部処理
    # ------------------------------------------------------------------
    def _cancel_pending(self) -> None:
        timer = self._state.pending_timer
        if timer is not None:
            self._state.pending_timer = None
            timer.cancel()

    def _on_timer(self, raw_value: T) -> None:
        if self._closed:
            return
        self._state.pending_timer = None
        # より新しい update が来ていれば、この発火は古い
        if raw_value != self._state.last_raw_value:
            return
        self._emit(raw_value)

    def _emit(self, value: T) -> None:
        if (
            self._distinct
            and self._state.emit_count > 0
            and value == self._state.last_emitted_value
        ):
            logger.debug("Debounced value unchanged; emission suppressed.")
            return

        self._state.last_emitted_value = value
        self._state.emit_count += 1
        logger.debug("Debounced value settled after %d ms.", self._state.window_ms)
        self._on_settled(value)


# update / flush / teardown を持つバインディングの公開名
DebouncedInput = DebounceEngine


def bind_debounced_input(
    window_ms: Optional[int],
    on_settled: Callable[[str], None],
    *,
    scheduler: Optional[Scheduler] = None,
    distinct: bool = False,
) -> DebouncedInput:
    """
    入力 1 つ分の debounce バインディングを作成する。

    :param window_ms: 静止期間（ミリ秒）。None の場合は UIKIT_DEBOUNCE_WINDOW_MS の設定値
    :param on_settled: 値が確定したときに 1 回呼ばれるコールバック
    :param scheduler: タイマー実行環境。省略時は実行中の asyncio ループ
    :param distinct: True の場合、直前に emit した値と同じ値の emit を抑止する
    """
    if window_ms is None:
        window_ms = get_debounce_settings().window_ms
    return DebounceEngine(window_ms, on_settled, scheduler=scheduler, distinct=distinct)
