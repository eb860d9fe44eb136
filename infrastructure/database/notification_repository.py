"""
Supabase implementation of Notification repository.
"""

from typing import Optional, List
from supabase import Client
from core.domain.constants import NOTIFICATION_TYPE_MESSAGE, RECENT_NOTIFICATIONS_LIMIT
from core.domain.models import Notification
from core.interfaces.repositories import INotificationRepository
from infrastructure.database.supabase_client import get_supabase_client, run_sync


class SupabaseNotificationRepository(INotificationRepository):
    """Supabase implementation of notification repository"""

    def __init__(self, client: Optional[Client] = None):
        self._client = client or get_supabase_client()

    def _to_model(self, data: dict) -> Notification:
        """Convert database row to Notification model"""
        actor = data.get("actor_profile_id")
        return Notification(
            id=str(data["id"]),
            type=str(data.get("type") or ""),
            actor_profile_id=str(actor) if actor else None,
            data=data.get("data") or {},
            is_read=bool(data.get("is_read", False)),
            created_at=data.get("created_at"),
        )

    @run_sync
    def _get_recent_sync(self, profile_id: str, limit: int) -> List[dict]:
        response = self._client.table("notifications")\
            .select("id, type, data, is_read, created_at, actor_profile_id")\
            .eq("profile_id", profile_id)\
            .order("created_at", desc=True)\
            .limit(limit)\
            .execute()
        return response.data or []

    async def get_recent(self, profile_id: str, limit: int = RECENT_NOTIFICATIONS_LIMIT) -> List[Notification]:
        rows = await self._get_recent_sync(profile_id, limit)
        return [self._to_model(r) for r in rows]

    @run_sync
    def _mark_read_sync(self, profile_id: str, notification_id: str):
        self._client.table("notifications")\
            .update({"is_read": True})\
            .eq("id", notification_id)\
            .eq("profile_id", profile_id)\
            .execute()

    async def mark_read(self, profile_id: str, notification_id: str) -> None:
        await self._mark_read_sync(profile_id, notification_id)

    @run_sync
    def _mark_all_read_sync(self, profile_id: str):
        self._client.table("notifications")\
            .update({"is_read": True})\
            .eq("profile_id", profile_id)\
            .eq("is_read", False)\
            .execute()

    async def mark_all_read(self, profile_id: str) -> None:
        await self._mark_all_read_sync(profile_id)

    @run_sync
    def _mark_thread_read_sync(self, profile_id: str, thread_id: str):
        self._client.table("notifications")\
            .update({"is_read": True})\
            .eq("profile_id", profile_id)\
            .eq("type", NOTIFICATION_TYPE_MESSAGE)\
            .contains("data", {"thread_id": thread_id})\
            .execute()

    async def mark_thread_read(self, profile_id: str, thread_id: str) -> None:
        await self._mark_thread_read_sync(profile_id, thread_id)
