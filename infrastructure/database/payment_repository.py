"""
Supabase implementation of Payment repository - events, stream payments, payout requests.
"""

from typing import List, Optional
from supabase import Client
from core.domain.models import EventSummary, StreamPayment, FighterAllocation, PayoutRequest
from core.interfaces.repositories import IPaymentRepository
from infrastructure.database.supabase_client import get_supabase_client, run_sync


def _to_allocations(value) -> List[FighterAllocation]:
    """fighter_allocations is a json column; anything but a list means no allocations"""
    if not isinstance(value, list):
        return []
    return [
        FighterAllocation(fighter_id=a.get("fighter_id"), amount=a.get("amount") or 0)
        for a in value
        if isinstance(a, dict)
    ]


class SupabasePaymentRepository(IPaymentRepository):
    """Supabase implementation of payment repository"""

    def __init__(self, client: Optional[Client] = None):
        self._client = client or get_supabase_client()

    @run_sync
    def _get_organizer_events_sync(self, organizer_id: str) -> List[dict]:
        response = self._client.table("events")\
            .select("id, title, name, event_date, owner_profile_id, profile_id")\
            .or_(f"owner_profile_id.eq.{organizer_id},profile_id.eq.{organizer_id}")\
            .execute()
        return response.data or []

    async def get_organizer_events(self, organizer_id: str) -> List[EventSummary]:
        rows = await self._get_organizer_events_sync(organizer_id)
        return [
            EventSummary(
                id=str(r["id"]),
                title=r.get("title"),
                name=r.get("name"),
                event_date=r.get("event_date"),
            )
            for r in rows
        ]

    @run_sync
    def _get_stream_payments_sync(self, event_ids: List[str]) -> List[dict]:
        response = self._client.table("stream_payments")\
            .select("event_id, amount_paid, fighter_allocations, platform_fee, created_at")\
            .in_("event_id", event_ids)\
            .execute()
        return response.data or []

    async def get_stream_payments(self, event_ids: List[str]) -> List[StreamPayment]:
        if not event_ids:
            return []
        rows = await self._get_stream_payments_sync(event_ids)
        return [
            StreamPayment(
                event_id=str(r["event_id"]),
                amount_paid=r.get("amount_paid") or 0,
                platform_fee=r.get("platform_fee"),
                fighter_allocations=_to_allocations(r.get("fighter_allocations")),
                created_at=r.get("created_at"),
            )
            for r in rows
        ]

    @run_sync
    def _get_payout_requests_sync(self, recipient_id: str, recipient_type: str,
                                  event_ids: List[str]) -> List[dict]:
        response = self._client.table("payout_requests")\
            .select("id, event_id, amount_requested, status, created_at, processed_at, "
                    "recipient_type, recipient_profile_id")\
            .eq("recipient_type", recipient_type)\
            .eq("recipient_profile_id", recipient_id)\
            .in_("event_id", event_ids)\
            .order("created_at", desc=True)\
            .execute()
        return response.data or []

    async def get_payout_requests(
        self, recipient_id: str, recipient_type: str, event_ids: List[str]
    ) -> List[PayoutRequest]:
        if not event_ids:
            return []
        rows = await self._get_payout_requests_sync(recipient_id, recipient_type, event_ids)
        return [
            PayoutRequest(
                id=str(r["id"]),
                event_id=r.get("event_id"),
                amount_requested=r.get("amount_requested") or 0,
                status=r.get("status") or "pending",
                created_at=r.get("created_at"),
                processed_at=r.get("processed_at"),
                recipient_type=r.get("recipient_type"),
                recipient_profile_id=r.get("recipient_profile_id"),
            )
            for r in rows
        ]
