# ui-kit/uikit/notifications/schemas.py

"""
一時通知（トースト）の共通スキーマ定義。

- 通知の重要度（閉じた列挙）
- 通知のライフサイクル状態
- 消去理由
- 通知 1 件分のレコードと、表示オプション

※ 通知はメモリ上にだけ存在し、永続化はしない。
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class NotificationSeverity(str, Enum):
    """
    通知の重要度。

    表示側の色分け・ログレベルの決定に使う。
    """

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class NotificationStatus(str, Enum):
    """
    通知のライフサイクル状態。

    pending → visible → dismissing → removed（終端）の順にしか遷移しない。
    """

    PENDING = "pending"
    VISIBLE = "visible"
    DISMISSING = "dismissing"
    REMOVED = "removed"


class DismissReason(str, Enum):
    """
    消去要求の理由。

    - CLICKAWAY: 通知の外側をクリックした（消去理由としては無視する）
    - CLOSE: 閉じるボタンなどの明示的な操作
    - HIDE: プログラムからの hide()
    - TIMEOUT: 自動消去タイマーの満了
    - CAPACITY: 同時表示数の上限による押し出し
    - TEARDOWN: 所有者の終了処理

    dismiss() には列挙にない文字列（表示側ライブラリの "escapeKeyDown" など）も渡せる。
    clickaway 以外はすべて通常の消去として扱う。
    """

    CLICKAWAY = "clickaway"
    CLOSE = "close"
    HIDE = "hide"
    TIMEOUT = "timeout"
    CAPACITY = "capacity"
    TEARDOWN = "teardown"


class NotificationOptions(BaseModel):
    """
    show() / enqueue() に渡す表示オプション。

    auto_hide_duration_ms:
    - 省略（None）: 設定値のデフォルト（6000ms）で自動消去
    - 0: 自動消去しない
    persistent=True の場合も自動消去しない。
    """

    severity: NotificationSeverity = Field(
        NotificationSeverity.INFO,
        description="通知の重要度。",
    )
    auto_hide_duration_ms: Optional[int] = Field(
        None,
        ge=0,
        description="自動消去までのミリ秒。省略時はデフォルト、0 は自動消去なし。",
    )
    closable: bool = Field(
        True,
        description="表示側で閉じるボタンを出すかどうか。",
    )
    persistent: bool = Field(
        False,
        description="True の場合は明示的に閉じるまで表示し続ける。",
    )


class Notification(BaseModel):
    """
    通知 1 件分のレコード。

    キューの内部遷移ロジックからのみ変更される。
    外部に渡すときは snapshot()（コピー）を使うこと。
    """

    id: str = Field(..., description="enqueue 時に払い出される一意な ID。再利用されない。")
    message: str = Field(..., description="表示テキスト。")
    severity: NotificationSeverity = Field(..., description="通知の重要度。")
    auto_hide_duration_ms: Optional[int] = Field(
        None,
        description="自動消去までのミリ秒。None は明示的に閉じるまで表示。",
    )
    closable: bool = Field(True, description="閉じるボタンを表示するかどうか。")
    status: NotificationStatus = Field(
        NotificationStatus.PENDING,
        description="ライフサイクル状態。",
    )
    created_at: float = Field(..., description="生成時刻（単調増加クロック、秒）。")


# ----------------------------------------------------------------------
# HTTP 用スキーマ
# ----------------------------------------------------------------------
class ShowNotificationRequest(NotificationOptions):
    message: str = Field(..., min_length=1, description="表示テキスト。")


class ShowNotificationResponse(BaseModel):
    id: str = Field(..., description="払い出された通知 ID。hide() に使う。")


class DismissNotificationRequest(BaseModel):
    reason: str = Field(
        DismissReason.CLOSE.value,
        min_length=1,
        description="消去理由。clickaway は無視され、それ以外の文字列（escapeKeyDown など）は通常の消去として扱う。",
    )


class NotificationListResponse(BaseModel):
    items: List[Notification] = Field(default_factory=list)
    count: int = Field(..., ge=0)
