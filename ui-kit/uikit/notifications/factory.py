# ui-kit/uikit/notifications/factory.py

"""
通知 dispatcher の簡易ファクトリ。

- 設定（環境変数）を読み込んで NotificationDispatcher を組み立てる
- presenter が指定されなければ LoggingNotificationPresenter を接続する

モジュールレベルのシングルトンは持たない。
戻り値はルートの所有者が保持し、終了時に teardown() すること。
"""

from __future__ import annotations

from typing import Optional

from uikit.utils.scheduler import Scheduler

from .config import NotificationSettings, get_notification_settings
from .dispatcher import NotificationDispatcher
from .service import LoggingNotificationPresenter, NotificationPresenter


def build_notification_dispatcher(
    scheduler: Optional[Scheduler] = None,
    *,
    settings: Optional[NotificationSettings] = None,
    presenter: Optional[NotificationPresenter] = None,
) -> NotificationDispatcher:
    """
    NotificationDispatcher を生成し、presenter を 1 つ接続して返す。
    """
    dispatcher = NotificationDispatcher.create(
        scheduler,
        settings=settings or get_notification_settings(),
    )
    dispatcher.attach_presenter(presenter or LoggingNotificationPresenter())
    return dispatcher
