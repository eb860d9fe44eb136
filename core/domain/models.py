"""
Domain models - the core of business logic.
These models are transport-agnostic and mirror the rows the backend stores.
"""

from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from datetime import datetime


# === FEES ===

class FeeBreakdown(BaseModel):
    """A payment split between the platform and the payee, in minor units"""
    amount: int
    fee_percentage: int
    platform_fee: int
    net_amount: int

    model_config = {"frozen": True}


# === NOTIFICATION ===

class Notification(BaseModel):
    """A row of the notifications table; type is free-form (message, follow, gym_added, ...)"""
    id: str
    type: str
    actor_profile_id: Optional[str] = None
    data: Dict[str, Any] = Field(default_factory=dict)
    is_read: bool = False
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# === PROFILE / EVENTS ===

class Profile(BaseModel):
    id: str
    username: Optional[str] = None
    role: Optional[str] = None


class Bout(BaseModel):
    id: str
    event_id: Optional[str] = None


class EventSummary(BaseModel):
    """The event fields the earnings breakdown shows"""
    id: str
    title: Optional[str] = None
    name: Optional[str] = None
    event_date: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.title or self.name or "Event"


# === PAYMENTS ===

class FighterAllocation(BaseModel):
    fighter_id: Optional[str] = None
    amount: int = 0


class StreamPayment(BaseModel):
    """A viewer's stream purchase; platform_fee is None on rows recorded before fees were stored"""
    event_id: str
    amount_paid: int = 0
    platform_fee: Optional[int] = None
    fighter_allocations: List[FighterAllocation] = Field(default_factory=list)
    created_at: Optional[datetime] = None


class PayoutRequest(BaseModel):
    id: str
    event_id: Optional[str] = None
    amount_requested: int = 0
    # pending | approved | processed | rejected; other values count as neither paid nor pending
    status: str = "pending"
    created_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None
    recipient_type: Optional[str] = None
    recipient_profile_id: Optional[str] = None


# === EARNINGS ===

class EventEarnings(BaseModel):
    event_id: str
    event_name: str
    event_date: Optional[str] = None
    total_revenue: int = 0
    platform_fee: int = 0
    fighter_share: int = 0
    organizer_share: int = 0


class OrganizerEarnings(BaseModel):
    total_revenue: int = 0
    total_platform_fees: int = 0
    total_fighter_share: int = 0
    organizer_share: int = 0
    total_paid_out: int = 0
    pending_requests: int = 0
    available_balance: int = 0
    earnings_breakdown: List[EventEarnings] = Field(default_factory=list)
    payout_requests: List[PayoutRequest] = Field(default_factory=list)
