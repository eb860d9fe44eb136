"""
Legacy route redirects.

Old links keep working: each deprecated path resolves to the page that
replaced it.
"""

import logging
from typing import Optional
from postgrest.exceptions import APIError
from core.domain.constants import (
    LEGACY_ROUTES,
    EVENTS_ROUTE,
    LOGIN_ROUTE,
    PROFILE_SETTINGS_ROUTE,
)
from core.interfaces.repositories import IBoutRepository, IProfileRepository

logger = logging.getLogger(__name__)


class RedirectService:
    """Resolves deprecated URLs to canonical ones"""

    def __init__(self, bout_repo: IBoutRepository, profile_repo: IProfileRepository):
        self.bout_repo = bout_repo
        self.profile_repo = profile_repo

    @staticmethod
    def resolve_static(path: str) -> Optional[str]:
        """Canonical path for a fixed legacy path, None if it is not one"""
        if len(path) > 1:
            path = path.rstrip("/")
        return LEGACY_ROUTES.get(path)

    async def resolve_bout(self, bout_id: str) -> str:
        """/bouts/:id -> /events/:eventId#bout-:boutId, or the events list for unknown bouts"""
        try:
            bout = await self.bout_repo.get_by_id(bout_id)
        except APIError as e:
            logger.error(f"[REDIRECT] Bout lookup failed for '{bout_id}': {e}")
            bout = None
        if bout and bout.event_id:
            return f"{EVENTS_ROUTE}/{bout.event_id}#bout-{bout.id}"
        logger.debug(f"[REDIRECT] Unknown bout '{bout_id}', falling back to events list")
        return EVENTS_ROUTE

    async def resolve_my_profile(self, user_id: Optional[str]) -> str:
        """/profile/me -> the signed-in user's public profile"""
        if not user_id:
            return LOGIN_ROUTE
        try:
            profile = await self.profile_repo.get_by_id(user_id)
        except APIError as e:
            logger.error(f"[REDIRECT] Profile lookup failed for {user_id}: {e}")
            profile = None
        if not profile or not profile.username:
            return PROFILE_SETTINGS_ROUTE
        return f"/profile/{profile.username}"
