# ui-kit/uikit/notifications/config.py

"""
通知キュー関連の設定値読み出しモジュール。

- 自動消去のデフォルト時間
- 同時表示数の上限（デフォルトは上限なし）
"""

from dataclasses import dataclass
from typing import Optional

from uikit.utils.config import get_env_int

DEFAULT_AUTO_HIDE_MS = 6000


@dataclass(frozen=True)
class NotificationSettings:
    """
    通知キューの設定値のまとまり。

    NOTE:
    - max_active=None の場合、件数の上限は設けない。
      hide()/タイムアウトなしで show() を続けるとメモリは増え続けるが、
      それは呼び出し側の責任とする。
    """

    default_auto_hide_ms: int = DEFAULT_AUTO_HIDE_MS
    max_active: Optional[int] = None


def get_notification_settings() -> NotificationSettings:
    """
    環境変数から NotificationSettings を構築する。

    任意:
      - UIKIT_TOAST_AUTO_HIDE_MS（デフォルト 6000ms）
      - UIKIT_TOAST_MAX_ACTIVE（デフォルト 上限なし）
    """
    default_auto_hide_ms = get_env_int("UIKIT_TOAST_AUTO_HIDE_MS", DEFAULT_AUTO_HIDE_MS)
    if default_auto_hide_ms < 0:
        raise RuntimeError(
            f"UIKIT_TOAST_AUTO_HIDE_MS must be >= 0, got {default_auto_hide_ms}"
        )

    max_active = get_env_int("UIKIT_TOAST_MAX_ACTIVE", None)
    if max_active is not None and max_active <= 0:
        raise RuntimeError(
            f"UIKIT_TOAST_MAX_ACTIVE must be positive, got {max_active}"
        )

    return NotificationSettings(
        default_auto_hide_ms=default_auto_hide_ms,
        max_active=max_active,
    )
