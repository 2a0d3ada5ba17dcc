# ui-kit/uikit/notifications/dispatcher.py

"""
通知の公開ファサード。

任意の呼び出し元には show() / hide() を、表示側には presenter 1 つ分の
スナップショット通知を提供する。

グローバルなシングルトンは持たない。
ルートの所有者（FastAPI の lifespan など）が 1 度だけ生成して teardown() し、
必要な箇所へは引数（DI）で渡すこと。
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from uikit.utils.scheduler import Scheduler

from .config import NotificationSettings
from .queue import NotificationQueue
from .schemas import DismissReason, Notification, NotificationOptions, NotificationSeverity
from .service import NotificationPresenter

logger = logging.getLogger(__name__)

# "show-notification" イベントで duration が省略された場合の表示時間
DEFAULT_EVENT_DURATION_MS = 3000


class DispatcherClosedError(RuntimeError):
    """teardown 済みの dispatcher に show() した場合に投げる例外。"""

    def __init__(self) -> None:
        super().__init__("NotificationDispatcher has already been torn down.")


class PresenterAlreadyAttachedError(RuntimeError):
    """presenter がすでに接続されているのに、別の presenter を接続しようとした場合の例外。"""

    def __init__(self) -> None:
        super().__init__("A presenter is already attached to this NotificationDispatcher.")


class NotificationDispatcher:
    """
    通知の公開ファサード。

    - show / hide: 任意の呼び出し元向け
    - attach_presenter: 表示側（1 つだけ）にスナップショットを渡す
    - teardown: 所有者が終了時に 1 度だけ呼ぶ
    """

    def __init__(self, queue: NotificationQueue) -> None:
        self._queue = queue
        self._presenter: Optional[NotificationPresenter] = None
        self._closed = False
        self._queue.set_on_change(self._publish)

    @classmethod
    def create(
        cls,
        scheduler: Optional[Scheduler] = None,
        *,
        settings: Optional[NotificationSettings] = None,
    ) -> "NotificationDispatcher":
        """キューごと dispatcher を組み立てる。scheduler 省略時は実行中のイベントループ。"""
        return cls(NotificationQueue(scheduler, settings=settings))

    @property
    def queue(self) -> NotificationQueue:
        return self._queue

    @property
    def is_closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # 呼び出し元向け API
    # ------------------------------------------------------------------
    def show(
        self,
        message: str,
        options: Optional[NotificationOptions] = None,
        **option_fields: Any,
    ) -> str:
        """
        通知を表示し、hide() に使う ID を返す。

        options の代わりに severity=... / auto_hide_duration_ms=... のように
        キーワード引数で指定してもよい（両方指定した場合はキーワード引数が優先）。
        """
        if self._closed:
            raise DispatcherClosedError()

        if option_fields:
            base = options.model_dump() if options is not None else {}
            options = NotificationOptions(**{**base, **option_fields})
        return self._queue.enqueue(message, options)

    def hide(self, notification_id: str) -> None:
        """通知を消去する。未知の ID・消去済みの ID は黙って無視する。"""
        self._queue.dismiss(notification_id, DismissReason.HIDE)

    def dismiss(
        self,
        notification_id: str,
        reason: Union[DismissReason, str] = DismissReason.CLOSE,
    ) -> bool:
        """表示側からの消去要求（閉じるボタン・clickaway・escapeKeyDown など）。"""
        return self._queue.dismiss(notification_id, reason)

    def handle_show_event(self, detail: Mapping[str, Any]) -> Optional[str]:
        """
        "show-notification" イベントの payload から通知を表示する。

        payload 例: {"message": "保存しました", "type": "success", "duration": 3000}
        - duration 省略時は 3000ms
        - message がない・type や duration が不正な payload はログに出して無視する
        """
        message = detail.get("message")
        if not message:
            logger.warning("show-notification event without message ignored: %r", dict(detail))
            return None

        try:
            options = NotificationOptions(
                severity=detail.get("type") or NotificationSeverity.INFO,
                auto_hide_duration_ms=int(detail.get("duration", DEFAULT_EVENT_DURATION_MS)),
            )
        except (TypeError, ValueError):
            # pydantic の ValidationError も ValueError のサブクラス
            logger.warning("Invalid show-notification event ignored: %r", dict(detail))
            return None
        return self.show(str(message), options)

    def snapshot(self) -> List[Notification]:
        return self._queue.snapshot()

    # ------------------------------------------------------------------
    # 表示側向け API
    # ------------------------------------------------------------------
    def attach_presenter(self, presenter: NotificationPresenter) -> None:
        """presenter を接続し、現在のスナップショットを即座に渡す。接続できるのは 1 つだけ。"""
        if self._presenter is not None:
            raise PresenterAlreadyAttachedError()
        self._presenter = presenter
        self._publish()

    def detach_presenter(self) -> None:
        self._presenter = None

    # ------------------------------------------------------------------
    # 終了処理
    # ------------------------------------------------------------------
    def teardown(self) -> None:
        """すべてのタイマーを取り消して通知を空にし、presenter を切り離す。"""
        if self._closed:
            return
        self._closed = True
        self._queue.teardown()
        self._presenter = None
        self._queue.set_on_change(None)
        logger.debug("NotificationDispatcher torn down.")

    def _publish(self) -> None:
        presenter = self._presenter
        if presenter is None:
            return
        try:
            presenter.render(self._queue.snapshot())
        except Exception:  # noqa: BLE001 - 表示側の失敗でキューを止めない
            logger.exception("Notification presenter failed. Continuing without it.")
