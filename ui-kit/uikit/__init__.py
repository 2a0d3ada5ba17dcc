# ui-kit/uikit/__init__.py
"""
UI-kit の一時値同期・通知キューエンジン。

This package contains:
- debounce: 入力値の debounce エンジン
- value: controlled / uncontrolled な値の解決と検索入力モデル
- notifications: 一時通知（トースト）のキューと公開ファサード
- main: 通知エンジンを HTTP で操作する FastAPI アプリケーション
"""
