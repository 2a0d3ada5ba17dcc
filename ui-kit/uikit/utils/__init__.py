# ui-kit/uikit/utils/__init__.py
"""設定読み込み・タイマー抽象などの共通ユーティリティ。"""
