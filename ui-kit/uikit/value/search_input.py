# ui-kit/uikit/value/search_input.py

"""
検索入力欄の状態モデル。

ValueResolver（値の所有者の決定）と DebounceEngine（確定値の遅延通知）を組み合わせ、
UI-kit の検索入力と同じ振る舞いを描画層なしで提供する。

- 入力ごとに on_change が即時に呼ばれる
- 入力が静止期間だけ止まったら on_search に確定値が 1 回渡される
- clear() は値を空にし、静止期間を待たずに on_search("") を呼ぶ
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from uikit.debounce import DebounceEngine, bind_debounced_input
from uikit.utils.scheduler import Scheduler

from .resolver import UNSET, ValueResolver


class SearchInputModel:
    """
    検索入力欄 1 つ分の状態。

    value を渡すと controlled（親が値を所有）、省略すると uncontrolled になる。
    on_change は入力ごと、on_search は確定値ごとに呼ばれる。
    """

    def __init__(
        self,
        *,
        value: Any = UNSET,
        default_value: str = "",
        on_change: Optional[Callable[[str], None]] = None,
        on_search: Optional[Callable[[str], None]] = None,
        debounce_ms: Optional[int] = None,
        show_clear_button: bool = True,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self._resolver: ValueResolver[str] = ValueResolver.from_props(
            value=value, default_value=default_value, on_change=on_change
        )
        self._on_search = on_search
        self._show_clear_button = show_clear_button
        self._debounce: DebounceEngine[str] = bind_debounced_input(
            debounce_ms, self._settled, scheduler=scheduler
        )
        self._rendered: str = self._resolver.resolve(value)
        self._cleared_while_controlled = False
        # 初期値も確定値として 1 度通知される
        self._debounce.update(self._rendered)

    @property
    def resolver(self) -> ValueResolver[str]:
        return self._resolver

    @property
    def debounce(self) -> DebounceEngine[str]:
        return self._debounce

    @property
    def value(self) -> str:
        return self._rendered

    @property
    def clear_button_visible(self) -> bool:
        return self._show_clear_button and bool(self._rendered)

    def render(self, value: Any = UNSET) -> str:
        """
        描画 1 回分。controlled の場合は呼び出し側が現在の値を渡す。

        表示値が変わったときだけ debounce に流す。
        """
        resolved = self._resolver.resolve(value)
        already_settled = self._cleared_while_controlled and resolved == ""
        self._cleared_while_controlled = False
        if already_settled:
            self._rendered = resolved
        elif resolved != self._rendered:
            self._rendered = resolved
            self._debounce.update(resolved)
        return resolved

    def input(self, new_value: str) -> None:
        """ユーザーの入力イベント。"""
        self._resolver.edit(new_value)
        if not self._resolver.is_controlled:
            self.render()

    def clear(self) -> None:
        """
        クリアボタン。確定を待たずに空文字を通知する。

        controlled の場合、表示値は親が "" を渡して描画し直すまで変わらない。
        その描画で同じ "" が再度 on_search に流れることはない。
        """
        self._resolver.edit("")
        self._debounce.update("")
        self._debounce.flush()
        if self._resolver.is_controlled:
            self._cleared_while_controlled = True
        else:
            self._rendered = ""

    def teardown(self) -> None:
        self._debounce.teardown()

    def _settled(self, value: str) -> None:
        if self._on_search is not None:
            self._on_search(value)
