# ui-kit/uikit/value/__init__.py
"""
入力値の所有者（controlled / uncontrolled）を扱うパッケージ。

- resolver: ValueResolver と Controlled / Uncontrolled
- search_input: ValueResolver + debounce を組み合わせた検索入力モデル
"""

from .resolver import (  # noqa: F401
    UNSET,
    Controlled,
    ControlledModeWarning,
    Uncontrolled,
    ValueResolver,
)
from .search_input import SearchInputModel  # noqa: F401
