# ui-kit/uikit/notifications/queue.py

"""
一時通知キュー本体。

表示中の通知の集合と、通知ごとの自動消去タイマーを所有する。

状態遷移:
- enqueue 時に pending → visible（即時）
- タイマー満了 or dismiss() で visible → dismissing → removed（即時）
- removed になった通知はキューから取り除かれ、その ID は二度と使われない

clickaway による dismiss は無視する（意図しない消去を避けるため）。

タイマーは通知 ID → ハンドルの辞書でキュー自身が保持し、
取り消しは辞書から取り出して cancel() するだけで済むようにしている。
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable, Dict, List, Optional, Union

from uikit.utils.scheduler import Scheduler, TimerHandle, ms_to_seconds, resolve_scheduler

from .config import NotificationSettings, get_notification_settings
from .schemas import (
    DismissReason,
    Notification,
    NotificationOptions,
    NotificationStatus,
)

logger = logging.getLogger(__name__)


def _new_notification_id() -> str:
    return uuid.uuid4().hex


def _reason_value(reason: Union[DismissReason, str]) -> str:
    if isinstance(reason, DismissReason):
        return reason.value
    return str(reason)


class NotificationQueue:
    """
    通知のライフサイクル管理。

    - enqueue(): 通知を作成して自動消去タイマーを予約し、ID を同期的に返す
    - dismiss(): 通知を消去する（未知の ID は何もしない）
    - snapshot(): 表示中の通知のコピーを挿入順で返す
    - teardown(): すべてのタイマーを取り消し、通知を空にする
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        *,
        settings: Optional[NotificationSettings] = None,
        on_change: Optional[Callable[[], None]] = None,
        id_factory: Callable[[], str] = _new_notification_id,
    ) -> None:
        self._scheduler = resolve_scheduler(scheduler)
        self._settings = settings or get_notification_settings()
        self._on_change = on_change
        self._id_factory = id_factory

        # dict は挿入順を保持する
        self._items: Dict[str, Notification] = {}
        self._timers: Dict[str, TimerHandle] = {}

    # ------------------------------------------------------------------
    # 参照用
    # ------------------------------------------------------------------
    @property
    def settings(self) -> NotificationSettings:
        return self._settings

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, notification_id: object) -> bool:
        return notification_id in self._items

    def get(self, notification_id: str) -> Optional[Notification]:
        item = self._items.get(notification_id)
        return item.model_copy() if item is not None else None

    def snapshot(self) -> List[Notification]:
        return [item.model_copy() for item in self._items.values()]

    def has_timer(self, notification_id: str) -> bool:
        return notification_id in self._timers

    def set_on_change(self, callback: Optional[Callable[[], None]]) -> None:
        self._on_change = callback

    # ------------------------------------------------------------------
    # 公開 API
    # ------------------------------------------------------------------
    def enqueue(self, message: str, options: Optional[NotificationOptions] = None) -> str:
        """
        通知を作成してキューに追加し、その ID を返す。

        同じ内容の通知でも重複排除はしない（呼び出し側の責任）。
        """
        options = options or NotificationOptions()
        duration_ms = self._resolve_auto_hide(options)

        notification_id = self._id_factory()
        if notification_id in self._items:
            raise RuntimeError(f"Notification id collision: {notification_id!r}")

        max_active = self._settings.max_active
        if max_active is not None:
            while len(self._items) >= max_active:
                oldest_id = next(iter(self._items))
                self._remove(oldest_id, DismissReason.CAPACITY, notify=False)

        notification = Notification(
            id=notification_id,
            message=message,
            severity=options.severity,
            auto_hide_duration_ms=duration_ms,
            closable=options.closable,
            status=NotificationStatus.PENDING,
            created_at=self._scheduler.time(),
        )
        # マウント演出は外部の責務なので pending はすぐに visible になる
        notification.status = NotificationStatus.VISIBLE
        self._items[notification_id] = notification

        if duration_ms is not None:
            self._timers[notification_id] = self._scheduler.call_later(
                ms_to_seconds(duration_ms), self._on_timer, notification_id
            )

        logger.debug(
            "Notification %s enqueued (severity=%s, auto_hide_ms=%s).",
            notification_id,
            notification.severity.value,
            duration_ms,
        )
        self._notify_change()
        return notification_id

    def dismiss(
        self,
        notification_id: str,
        reason: Union[DismissReason, str] = DismissReason.CLOSE,
    ) -> bool:
        """
        通知を消去する。

        :return: 実際に removed まで遷移した場合 True
        - 未知の ID / 消去済みの ID: 何もしない（エラーではない）
        - reason == "clickaway": 無視する（visible のまま）
        - それ以外の理由（"escapeKeyDown" など列挙にない文字列も含む）: 通常どおり消去する
        """
        if notification_id not in self._items:
            return False

        reason_value = _reason_value(reason)
        if reason_value == DismissReason.CLICKAWAY.value:
            logger.debug("Ignoring clickaway dismissal for notification %s.", notification_id)
            return False

        self._remove(notification_id, reason_value)
        return True

    def teardown(self) -> None:
        """すべてのタイマーを取り消し、表示中の通知をすべて取り除く。"""
        for notification_id in list(self._items):
            self._remove(notification_id, DismissReason.TEARDOWN, notify=False)
        self._notify_change()

    # ------------------------------------------------------------------
    # 内部処理
    # ------------------------------------------------------------------
    def _resolve_auto_hide(self, options: NotificationOptions) -> Optional[int]:
        if options.persistent:
            return None
        if options.auto_hide_duration_ms is None:
            default_ms = self._settings.default_auto_hide_ms
            return default_ms or None
        if options.auto_hide_duration_ms == 0:
            return None
        return options.auto_hide_duration_ms

    def _on_timer(self, notification_id: str) -> None:
        # 発火済みのハンドルを取り除く。見つからなければ既に消去済み
        if self._timers.pop(notification_id, None) is None:
            return
        if notification_id in self._items:
            self._remove(notification_id, DismissReason.TIMEOUT)

    def _remove(
        self,
        notification_id: str,
        reason: Union[DismissReason, str],
        *,
        notify: bool = True,
    ) -> None:
        timer = self._timers.pop(notification_id, None)
        if timer is not None:
            timer.cancel()

        notification = self._items[notification_id]
        notification.status = NotificationStatus.DISMISSING
        # 退場演出は表示側の責務なので、データ上はすぐに removed にする
        notification.status = NotificationStatus.REMOVED
        del self._items[notification_id]

        logger.debug("Notification %s removed (reason=%s).", notification_id, _reason_value(reason))
        if notify:
            self._notify_change()

    def _notify_change(self) -> None:
        if self._on_change is not None:
            self._on_change()
