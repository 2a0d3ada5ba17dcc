# ui-kit/uikit/value/resolver.py

"""
controlled / uncontrolled な値の解決ロジック。

値の「正」がどこにあるかを構築時に 1 度だけ決める。

- Controlled: 呼び出し側が値を持つ。resolver はコピーを持たず、編集はすべて on_change へ転送する
- Uncontrolled: resolver 自身が値を持ち、編集時に更新したうえで on_change にも通知する

構築後にモードを切り替えることはサポートしない。
切り替えを検出した場合は ControlledModeWarning を出し、元のモードのまま動作する。
モードを変えたい場合は resolver を作り直すこと。
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Unset:
    """「値が渡されていない」ことを None と区別するための番兵。"""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


class ControlledModeWarning(UserWarning):
    """controlled / uncontrolled の途中切り替えを検出したときの警告。"""


@dataclass(frozen=True)
class Controlled(Generic[T]):
    value: T
    on_change: Optional[Callable[[T], None]] = None


@dataclass(frozen=True)
class Uncontrolled(Generic[T]):
    initial: T
    on_change: Optional[Callable[[T], None]] = None


ValueSource = Union[Controlled[T], Uncontrolled[T]]


class ValueResolver(Generic[T]):
    """
    1 入力分の値の所有者を決め、編集をルーティングする。
    """

    def __init__(self, source: ValueSource) -> None:
        if not isinstance(source, (Controlled, Uncontrolled)):
            raise TypeError(
                f"source must be Controlled or Uncontrolled, got {type(source).__name__}"
            )
        self._source = source
        self._internal: Optional[T] = (
            source.initial if isinstance(source, Uncontrolled) else None
        )
        self._warned = False

    @classmethod
    def from_props(
        cls,
        value: Any = UNSET,
        default_value: Any = "",
        on_change: Optional[Callable[[Any], None]] = None,
    ) -> "ValueResolver[Any]":
        """
        コンポーネントの props と同じ形から resolver を作る。

        value が渡されていれば Controlled、そうでなければ default_value を初期値とする Uncontrolled。
        """
        if value is not UNSET:
            return cls(Controlled(value=value, on_change=on_change))
        return cls(Uncontrolled(initial=default_value, on_change=on_change))

    @property
    def is_controlled(self) -> bool:
        return isinstance(self._source, Controlled)

    def resolve(self, external: Any = UNSET) -> T:
        """
        描画ごとに呼ばれ、表示すべき値を返す。

        :param external: 呼び出し側が今回の描画で渡した値（controlled の場合は必須）
        """
        if isinstance(self._source, Controlled):
            if external is UNSET:
                self._warn_mode_switch(from_mode="controlled", to_mode="uncontrolled")
                # コピーは持たないため、構築時に渡された値を返すしかない
                return self._source.value
            return external

        if external is not UNSET:
            self._warn_mode_switch(from_mode="uncontrolled", to_mode="controlled")
        return self._internal

    def edit(self, new_value: T) -> None:
        """
        ユーザーの編集を反映する。

        - Controlled: on_change に無条件で転送するだけ（再描画するかは呼び出し側が決める）
        - Uncontrolled: 内部値を更新し、on_change にも通知する
        """
        if isinstance(self._source, Uncontrolled):
            self._internal = new_value

        if self._source.on_change is not None:
            self._source.on_change(new_value)

    def _warn_mode_switch(self, *, from_mode: str, to_mode: str) -> None:
        # 同じ resolver では 1 回だけ警告する
        if self._warned:
            return
        self._warned = True

        text = (
            f"A component is changing a {from_mode} input to be {to_mode}. "
            "Decide between controlled and uncontrolled once and rebuild the "
            "resolver to switch."
        )
        logger.warning(text)
        warnings.warn(text, ControlledModeWarning, stacklevel=3)
