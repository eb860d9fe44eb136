"""
Notification service - recent notifications and read-state changes.
"""

import logging
from typing import List, Tuple
from postgrest.exceptions import APIError
from core.domain.models import Notification
from core.interfaces.repositories import INotificationRepository

logger = logging.getLogger(__name__)


class NotificationService:
    """Service for notification operations"""

    def __init__(self, notification_repo: INotificationRepository):
        self.notification_repo = notification_repo

    async def get_recent(self, profile_id: str) -> Tuple[bool, str, List[Notification]]:
        """
        Newest notifications of the profile, capped by the repository limit.
        Returns: (success, message, notifications)
        """
        try:
            notifications = await self.notification_repo.get_recent(profile_id)
        except APIError as e:
            logger.error(f"[NOTIFICATIONS] load notifications error: {e}")
            return False, "Could not load notifications", []
        return True, "ok", notifications

    async def mark_read(self, profile_id: str, notification_id: str) -> Tuple[bool, str]:
        """
        Mark a single notification read. Only the owner's rows are touched,
        so a foreign id silently updates nothing.
        Returns: (success, message)
        """
        try:
            await self.notification_repo.mark_read(profile_id, notification_id)
        except APIError as e:
            logger.error(f"[NOTIFICATIONS] mark notification read error: {e}")
            return False, "Could not mark notification as read"
        return True, "ok"

    async def mark_all_read(self, profile_id: str) -> Tuple[bool, str]:
        """Mark every unread notification of the profile read"""
        try:
            await self.notification_repo.mark_all_read(profile_id)
        except APIError as e:
            logger.error(f"[NOTIFICATIONS] mark notifications read error: {e}")
            return False, "Could not mark as read"
        return True, "ok"

    async def mark_thread_read(self, profile_id: str, thread_id: str) -> Tuple[bool, str]:
        """Mark the message notifications of one chat thread read"""
        try:
            await self.notification_repo.mark_thread_read(profile_id, thread_id)
        except APIError as e:
            logger.error(f"[NOTIFICATIONS] mark thread notifications read error: {e}")
            return False, "Could not mark thread as read"
        return True, "ok"
