"""
Repository interfaces - abstractions for data access.
This allows swapping implementations (Supabase -> PostgreSQL, in-memory fakes, etc.)
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from core.domain.constants import RECENT_NOTIFICATIONS_LIMIT
from core.domain.models import (
    Notification,
    Profile, Bout, EventSummary,
    StreamPayment, PayoutRequest,
)


class IAuthRepository(ABC):
    """Interface for resolving who owns an access token"""

    @abstractmethod
    async def get_user_id(self, access_token: str) -> Optional[str]:
        """Return the user id for a valid token, None otherwise"""
        pass


class INotificationRepository(ABC):
    """Interface for notification data access"""

    @abstractmethod
    async def get_recent(self, profile_id: str, limit: int = RECENT_NOTIFICATIONS_LIMIT) -> List[Notification]:
        """Newest notifications of the profile first"""
        pass

    @abstractmethod
    async def mark_read(self, profile_id: str, notification_id: str) -> None:
        """Mark one of the profile's notifications read"""
        pass

    @abstractmethod
    async def mark_all_read(self, profile_id: str) -> None:
        """Mark every unread notification of the profile read"""
        pass

    @abstractmethod
    async def mark_thread_read(self, profile_id: str, thread_id: str) -> None:
        """Mark the profile's message notifications for a thread read"""
        pass


class IProfileRepository(ABC):
    """Interface for profile data access"""

    @abstractmethod
    async def get_by_id(self, profile_id: str) -> Optional[Profile]:
        """Get profile by ID"""
        pass


class IBoutRepository(ABC):
    """Interface for bout data access"""

    @abstractmethod
    async def get_by_id(self, bout_id: str) -> Optional[Bout]:
        """Get bout by ID"""
        pass


class IPaymentRepository(ABC):
    """Interface for events, payments and payout requests used by earnings"""

    @abstractmethod
    async def get_organizer_events(self, organizer_id: str) -> List[EventSummary]:
        """Events owned by an organizer"""
        pass

    @abstractmethod
    async def get_stream_payments(self, event_ids: List[str]) -> List[StreamPayment]:
        """Stream payments for the given events"""
        pass

    @abstractmethod
    async def get_payout_requests(
        self, recipient_id: str, recipient_type: str, event_ids: List[str]
    ) -> List[PayoutRequest]:
        """Payout requests of a recipient for the given events, newest first"""
        pass
