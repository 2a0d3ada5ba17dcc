# ui-kit/uikit/utils/config.py

"""
環境変数読み取り用のユーティリティ。
debounce / notifications の各設定モジュールから共通利用する。

設定値はすべて省略可能で、未設定なら各モジュールのデフォルトを使う。
"""

import os
from typing import Optional


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    環境変数を取得するヘルパー。

    :param name: 環境変数名
    :param default: 未設定（または空文字）の場合に返す値
    :return: 文字列値
    """
    value = os.getenv(name)

    if value is None or value == "":
        return default

    return value


def get_env_int(name: str, default: Optional[int]) -> Optional[int]:
    """
    整数値の環境変数を取得するヘルパー。

    - 未設定の場合は default を返す（None も可）
    - 不正な値が入っていた場合は RuntimeError にする
    """
    raw = get_env(name)
    if raw is None:
        return default

    try:
        return int(raw)
    except ValueError as exc:  # noqa: TRY003
        raise RuntimeError(
            f"Invalid integer value for env var {name}: {raw!r}"
        ) from exc
