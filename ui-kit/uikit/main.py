# ui-kit/uikit/main.py

"""
UI-kit エンジンを HTTP 経由で扱うためのアプリケーションエントリーポイント。

主な責務:
- NotificationDispatcher の唯一の所有者として、lifespan で 1 度だけ生成・終了する
- /notifications エンドポイントを公開する
- /health エンドポイントを公開する
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from uikit.notifications.config import NotificationSettings
from uikit.notifications.factory import build_notification_dispatcher
from uikit.notifications.router import router as notifications_router
from uikit.notifications.service import NotificationPresenter


def create_app(
    *,
    settings: Optional[NotificationSettings] = None,
    presenter: Optional[NotificationPresenter] = None,
) -> FastAPI:
    """
    FastAPI アプリケーションファクトリ。

    - 通知エンドポイント (/notifications)
    - ヘルスチェックエンドポイント (/health)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        dispatcher = build_notification_dispatcher(
            asyncio.get_running_loop(),
            settings=settings,
            presenter=presenter,
        )
        app.state.notification_dispatcher = dispatcher
        try:
            yield
        finally:
            dispatcher.teardown()
            app.state.notification_dispatcher = None

    app = FastAPI(title="UI-kit Engine", lifespan=lifespan)

    # ルーター登録
    app.include_router(notifications_router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """
        簡易ヘルスチェックエンドポイント。
        """
        return {"status": "ok"}

    return app
