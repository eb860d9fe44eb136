"""
Notification endpoints.
"""

from aiohttp import web
from adapters.api.auth import current_user_id, not_authenticated, read_json
from core.domain.models import Notification
from core.interfaces.repositories import IAuthRepository
from core.services.notification_service import NotificationService


def _serialize_notification(n: Notification) -> dict:
    return {
        "id": n.id,
        "type": n.type,
        "data": n.data,
        "is_read": n.is_read,
        "created_at": n.created_at.isoformat() if n.created_at else None,
        "actor_profile_id": n.actor_profile_id,
    }


def create_notification_routes(
    auth_repo: IAuthRepository,
    notification_service: NotificationService,
) -> web.RouteTableDef:
    routes = web.RouteTableDef()

    @routes.get("/api/notifications")
    async def handle_list(request: web.Request) -> web.Response:
        user_id = await current_user_id(request, auth_repo)
        if not user_id:
            # signed out: nothing to show
            return web.json_response({"notifications": [], "unreadCount": 0})

        ok, message, notifications = await notification_service.get_recent(user_id)
        if not ok:
            return web.json_response({"error": message}, status=500)
        return web.json_response({
            "notifications": [_serialize_notification(n) for n in notifications],
            "unreadCount": sum(1 for n in notifications if not n.is_read),
        })

    @routes.post("/api/notifications/mark-read")
    async def handle_mark_read(request: web.Request) -> web.Response:
        user_id = await current_user_id(request, auth_repo)
        if not user_id:
            return not_authenticated()

        body = await read_json(request)
        notification_id = body.get("notificationId")
        if not notification_id:
            return web.json_response({"error": "notificationId is required"}, status=400)

        ok, message = await notification_service.mark_read(user_id, str(notification_id))
        if not ok:
            return web.json_response({"error": message}, status=500)
        return web.json_response({"ok": True})

    @routes.post("/api/notifications/mark-read-all")
    async def handle_mark_read_all(request: web.Request) -> web.Response:
        user_id = await current_user_id(request, auth_repo)
        if not user_id:
            return not_authenticated()

        ok, message = await notification_service.mark_all_read(user_id)
        if not ok:
            return web.json_response({"error": message}, status=500)
        return web.json_response({"ok": True})

    @routes.post("/api/notifications/mark-thread-read")
    async def handle_mark_thread_read(request: web.Request) -> web.Response:
        user_id = await current_user_id(request, auth_repo)
        if not user_id:
            return not_authenticated()

        body = await read_json(request)
        thread_id = body.get("threadId")
        if not thread_id:
            return web.json_response({"error": "threadId is required"}, status=400)

        ok, message = await notification_service.mark_thread_read(user_id, str(thread_id))
        if not ok:
            return web.json_response({"error": message}, status=500)
        return web.json_response({"ok": True})

    return routes
