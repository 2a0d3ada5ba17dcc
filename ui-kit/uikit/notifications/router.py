# ui-kit/uikit/notifications/router.py

"""
通知操作用の FastAPI ルーター定義。

- GET    /notifications
- POST   /notifications
- DELETE /notifications/{notification_id}
- POST   /notifications/{notification_id}/dismiss

タイマーはイベントループ上で動くため、エンドポイントはすべて async def にしている。
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from .dispatcher import DispatcherClosedError, NotificationDispatcher
from .schemas import (
    DismissNotificationRequest,
    Notification,
    NotificationListResponse,
    ShowNotificationRequest,
    ShowNotificationResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def get_notification_dispatcher(request: Request) -> NotificationDispatcher:
    """
    アプリの lifespan で生成された NotificationDispatcher を取得する。

    NOTE:
    - dispatcher の所有者は app（lifespan）であり、ここでは参照を渡すだけ。
    - テストでは app.dependency_overrides で差し替えられる。
    """
    dispatcher = getattr(request.app.state, "notification_dispatcher", None)
    if dispatcher is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Notification dispatcher is not running.",
        )
    return dispatcher


@router.get(
    "",
    response_model=NotificationListResponse,
    summary="表示中の通知一覧を取得",
)
async def list_notifications(
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> NotificationListResponse:
    items = dispatcher.snapshot()
    return NotificationListResponse(items=items, count=len(items))


@router.post(
    "",
    response_model=ShowNotificationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="通知を表示する",
)
async def show_notification(
    body: ShowNotificationRequest,
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> ShowNotificationResponse:
    """
    通知を 1 件表示し、その ID を返す。

    - auto_hide_duration_ms 省略時はデフォルト（6000ms）で自動消去
    - dispatcher が終了済みの場合は 503
    """
    options = body.model_dump(exclude={"message"})
    try:
        notification_id = dispatcher.show(body.message, **options)
    except DispatcherClosedError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exc),
        ) from exc

    return ShowNotificationResponse(id=notification_id)


@router.delete(
    "/{notification_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="通知を消去する",
)
async def hide_notification(
    notification_id: str,
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> Response:
    """未知の ID・消去済みの ID でもエラーにはしない。"""
    dispatcher.hide(notification_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{notification_id}/dismiss",
    response_model=Notification,
    summary="表示側からの消去要求",
    description="閉じるボタン・clickaway などの理由付き消去。clickaway は無視される。",
)
async def dismiss_notification(
    notification_id: str,
    body: DismissNotificationRequest,
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    - 通知がまだ表示中なら 200 でその通知を返す（clickaway の場合）
    - 消去された・存在しない場合は 204
    """
    dispatcher.dismiss(notification_id, body.reason)
    remaining = dispatcher.queue.get(notification_id)
    if remaining is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return remaining
