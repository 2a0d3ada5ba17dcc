# ui-kit/uikit/notifications/__init__.py

"""
一時通知（トースト）用モジュール群。

エンジンは描画を行わず、通知のライフサイクルと自動消去タイマーだけを管理する。
実際の描画は presenter として外から差し込む。

構成イメージ:
- schemas: 通知・オプション・消去理由のスキーマ
- queue: 通知と自動消去タイマーを所有する NotificationQueue
- dispatcher: show()/hide() を提供する公開ファサード
- service: presenter インターフェースとログ出力のみの実装
- factory: 設定を読み込んで dispatcher を組み立てる
- router: HTTP 経由で通知を操作する FastAPI ルーター
"""

from .config import NotificationSettings, get_notification_settings  # noqa: F401
from .dispatcher import (  # noqa: F401
    DispatcherClosedError,
    NotificationDispatcher,
    PresenterAlreadyAttachedError,
)
from .factory import build_notification_dispatcher  # noqa: F401
from .queue import NotificationQueue  # noqa: F401
from .schemas import (  # noqa: F401
    DismissReason,
    Notification,
    NotificationOptions,
    NotificationSeverity,
    NotificationStatus,
)
from .service import LoggingNotificationPresenter, NotificationPresenter  # noqa: F401
