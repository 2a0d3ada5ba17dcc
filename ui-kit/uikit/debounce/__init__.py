# ui-kit/uikit/debounce/__init__.py
"""
入力値 debounce 用パッケージ。

- engine: DebounceEngine と bind_debounced_input()
- config: 静止期間（window）の設定値
"""

from .config import DebounceSettings, get_debounce_settings  # noqa: F401
from .engine import DebounceEngine, DebouncedInput, DebounceState, bind_debounced_input  # noqa: F401
