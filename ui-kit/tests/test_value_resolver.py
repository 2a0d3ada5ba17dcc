# ui-kit/tests/test_value_resolver.py

import logging
import warnings
from typing import List

import pytest

from uikit.value import Controlled, ControlledModeWarning, Uncontrolled, ValueResolver


def test_controlled_forwards_edits_without_keeping_a_copy() -> None:
    """
    Controlled の場合、edit() は on_change に転送するだけで表示値は変えない。
    """
    changes: List[str] = []
    resolver = ValueResolver(Controlled(value="initial", on_change=changes.append))

    resolver.edit("typed")

    assert changes == ["typed"]
    # 呼び出し側が再描画で値を渡すまで表示値は呼び出し側のもの
    assert resolver.resolve("initial") == "initial"
    assert resolver.resolve("typed") == "typed"


def test_controlled_forwards_every_edit_unconditionally() -> None:
    changes: List[str] = []
    resolver = ValueResolver(Controlled(value="same", on_change=changes.append))

    resolver.edit("same")
    resolver.edit("same")

    assert changes == ["same", "same"]


def test_uncontrolled_owns_and_mutates_value() -> None:
    changes: List[str] = []
    resolver = ValueResolver(Uncontrolled(initial="", on_change=changes.append))

    assert resolver.resolve() == ""
    resolver.edit("abc")

    assert resolver.resolve() == "abc"
    assert changes == ["abc"]


def test_uncontrolled_without_observer() -> None:
    resolver = ValueResolver(Uncontrolled(initial="x"))
    resolver.edit("y")
    assert resolver.resolve() == "y"


def test_from_props_picks_variant() -> None:
    assert ValueResolver.from_props(value="v").is_controlled is True
    assert ValueResolver.from_props(value=None).is_controlled is True
    assert ValueResolver.from_props(default_value="d").is_controlled is False
    assert ValueResolver.from_props(default_value="d").resolve() == "d"


def test_rejects_unknown_source() -> None:
    with pytest.raises(TypeError):
        ValueResolver("not-a-variant")  # type: ignore[arg-type]


def test_switching_controlled_to_uncontrolled_warns_once(caplog) -> None:
    resolver = ValueResolver(Controlled(value="kept"))

    with caplog.at_level(logging.WARNING, logger="uikit.value.resolver"):
        with pytest.warns(ControlledModeWarning):
            value = resolver.resolve()

    # モードは切り替わらず、警告のみ
    assert value == "kept"
    assert resolver.is_controlled is True
    assert any("controlled" in r.getMessage() for r in caplog.records)

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        # 2 回目以降は警告しない
        resolver.resolve()


def test_switching_uncontrolled_to_controlled_warns_and_keeps_internal_value() -> None:
    resolver = ValueResolver(Uncontrolled(initial="own"))

    with pytest.warns(ControlledModeWarning):
        value = resolver.resolve("external")

    assert value == "own"
    assert resolver.is_controlled is False
