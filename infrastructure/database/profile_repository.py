"""
Supabase implementation of Profile and Bout repositories.
"""

from typing import Optional
from supabase import Client
from core.domain.models import Profile, Bout
from core.interfaces.repositories import IProfileRepository, IBoutRepository
from infrastructure.database.supabase_client import get_supabase_client, run_sync


class SupabaseProfileRepository(IProfileRepository):
    """Supabase implementation of profile repository"""

    def __init__(self, client: Optional[Client] = None):
        self._client = client or get_supabase_client()

    @run_sync
    def _get_by_id_sync(self, profile_id: str) -> Optional[dict]:
        response = self._client.table("profiles")\
            .select("id, username, role")\
            .eq("id", profile_id)\
            .limit(1)\
            .execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, profile_id: str) -> Optional[Profile]:
        data = await self._get_by_id_sync(profile_id)
        if not data:
            return None
        return Profile(id=str(data["id"]), username=data.get("username"), role=data.get("role"))


class SupabaseBoutRepository(IBoutRepository):
    """Supabase implementation of bout repository"""

    def __init__(self, client: Optional[Client] = None):
        self._client = client or get_supabase_client()

    @run_sync
    def _get_by_id_sync(self, bout_id: str) -> Optional[dict]:
        response = self._client.table("event_bouts")\
            .select("id, event_id")\
            .eq("id", bout_id)\
            .limit(1)\
            .execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, bout_id: str) -> Optional[Bout]:
        data = await self._get_by_id_sync(bout_id)
        if not data:
            return None
        event_id = data.get("event_id")
        return Bout(id=str(data["id"]), event_id=str(event_id) if event_id else None)
