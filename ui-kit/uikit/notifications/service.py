# ui-kit/uikit/notifications/service.py

"""
通知の表示側（presenter）インターフェースと最小実装。

エンジン自体は何も描画しない。
表示中の通知のスナップショットを受け取る presenter を 1 つだけ接続でき、
実際の描画（トースト UI など）はその presenter の実装側で行う。

- NotificationPresenter: render() を持つ最小インターフェース
- LoggingNotificationPresenter: 新しく表示された通知をログに出すだけのデフォルト実装
"""

from __future__ import annotations

import logging
from typing import Protocol, Sequence, Set

from .schemas import Notification, NotificationSeverity

logger = logging.getLogger(__name__)


class NotificationPresenter(Protocol):
    """
    表示側の最小インターフェース。

    実装例:
    - LoggingNotificationPresenter: ログ出力のみ
    - WebSocket で管理画面にスナップショットを push する presenter（将来）
    """

    def render(self, notifications: Sequence[Notification]) -> None:  # pragma: no cover - Protocol
        ...


class LoggingNotificationPresenter:
    """
    新たに表示された通知を Python の logger に記録するだけの presenter。

    同じ通知を二重にログ出力しないよう、表示済みの ID を覚えておく。
    """

    def __init__(self, logger_: logging.Logger | None = None) -> None:
        self._logger = logger_ or logger
        self._shown: Set[str] = set()

    def render(self, notifications: Sequence[Notification]) -> None:
        """
        通知を重要度に応じたログレベルで出力する。
        """
        current = {n.id for n in notifications}
        for notification in notifications:
            if notification.id in self._shown:
                continue
            text = f"[toast][{notification.severity.value}] {notification.message}"

            if notification.severity == NotificationSeverity.ERROR:
                self._logger.error(text)
            elif notification.severity == NotificationSeverity.WARNING:
                self._logger.warning(text)
            else:
                self._logger.info(text)

        # 消えた通知の ID は忘れる
        self._shown = current
