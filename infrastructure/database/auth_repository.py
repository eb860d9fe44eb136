"""
Supabase Auth lookup - resolves access tokens to user ids.
"""

import logging
from typing import Optional
from supabase_auth.errors import AuthError
from supabase import Client
from core.interfaces.repositories import IAuthRepository
from infrastructure.database.supabase_client import get_supabase_client, run_sync

logger = logging.getLogger(__name__)


class SupabaseAuthRepository(IAuthRepository):
    """Asks Supabase Auth who owns a JWT; the backend does the verification"""

    def __init__(self, client: Optional[Client] = None):
        self._client = client or get_supabase_client()

    @run_sync
    def _get_user_sync(self, access_token: str):
        return self._client.auth.get_user(access_token)

    async def get_user_id(self, access_token: str) -> Optional[str]:
        if not access_token:
            return None
        try:
            response = await self._get_user_sync(access_token)
        except AuthError as e:
            logger.info(f"[AUTH] Token rejected: {e}")
            return None
        user = getattr(response, "user", None) if response else None
        return str(user.id) if user else None
