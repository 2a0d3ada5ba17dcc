# ui-kit/uikit/debounce/config.py

"""
debounce 関連の設定値読み出しモジュール。
"""

from dataclasses import dataclass

from uikit.utils.config import get_env_int

DEFAULT_WINDOW_MS = 300


@dataclass(frozen=True)
class DebounceSettings:
    """入力 debounce の設定値。"""

    window_ms: int = DEFAULT_WINDOW_MS


def get_debounce_settings() -> DebounceSettings:
    """
    環境変数から DebounceSettings を構築する。

    任意:
      - UIKIT_DEBOUNCE_WINDOW_MS（デフォルト 300ms。負の値は 0 扱い）
    """
    window_ms = get_env_int("UIKIT_DEBOUNCE_WINDOW_MS", DEFAULT_WINDOW_MS)
    return DebounceSettings(window_ms=max(0, window_ms))
