"""
Earnings service - what event organizers have earned and can still withdraw.

Organizer share per event = revenue - platform fees - fighter allocations,
floored at zero. Payments recorded before fees were stored carry no
platform_fee; their fee is recomputed with the current calculator, or taken
as 0 when the recorded amount is negative (a refund or correction row). The
legacy dashboard counted such payments as carrying no fee at all, so totals
for old events intentionally differ from the figures it showed.
"""

import logging
from collections import defaultdict
from typing import Optional, List, Dict, Tuple
from core.domain.constants import (
    ORGANIZER_ROLES,
    ORGANIZER_RECIPIENT_TYPE,
    PAYOUT_STATUSES_PAID,
    PAYOUT_STATUSES_PENDING,
)
from core.domain.models import (
    EventEarnings,
    EventSummary,
    OrganizerEarnings,
    PayoutRequest,
    StreamPayment,
)
from core.interfaces.repositories import IPaymentRepository, IProfileRepository
from core.utils.platform_fees import PlatformFeeCalculator

logger = logging.getLogger(__name__)


def summarize_payouts(payout_requests: List[PayoutRequest]) -> Tuple[int, int]:
    """Returns: (total paid out, total still pending or approved)"""
    paid_out = sum(
        pr.amount_requested for pr in payout_requests if pr.status in PAYOUT_STATUSES_PAID
    )
    pending = sum(
        pr.amount_requested for pr in payout_requests if pr.status in PAYOUT_STATUSES_PENDING
    )
    return paid_out, pending


class EarningsService:
    """Service for organizer earnings"""

    def __init__(
        self,
        payment_repo: IPaymentRepository,
        profile_repo: IProfileRepository,
        fee_calculator: PlatformFeeCalculator,
    ):
        self.payment_repo = payment_repo
        self.profile_repo = profile_repo
        self.fee_calculator = fee_calculator

    def payment_platform_fee(self, payment: StreamPayment) -> int:
        if payment.platform_fee is not None:
            return payment.platform_fee
        if payment.amount_paid < 0:
            return 0
        return self.fee_calculator.calculate_fee(payment.amount_paid)

    def build_breakdown(
        self,
        events: List[EventSummary],
        payments: List[StreamPayment],
    ) -> List[EventEarnings]:
        """Per-event revenue split, in the order the events were given"""
        revenue: Dict[str, int] = defaultdict(int)
        fees: Dict[str, int] = defaultdict(int)
        fighters: Dict[str, int] = defaultdict(int)

        for payment in payments:
            revenue[payment.event_id] += payment.amount_paid
            fees[payment.event_id] += self.payment_platform_fee(payment)
            fighters[payment.event_id] += sum(a.amount for a in payment.fighter_allocations)

        breakdown = []
        for event in events:
            organizer_share = max(0, revenue[event.id] - fees[event.id] - fighters[event.id])
            breakdown.append(EventEarnings(
                event_id=event.id,
                event_name=event.display_name,
                event_date=event.event_date,
                total_revenue=revenue[event.id],
                platform_fee=fees[event.id],
                fighter_share=fighters[event.id],
                organizer_share=organizer_share,
            ))
        return breakdown

    async def get_organizer_earnings(
        self,
        profile_id: str
    ) -> Tuple[bool, str, Optional[OrganizerEarnings]]:
        """
        Earnings across all events the organizer owns.
        Returns: (success, message, earnings)
        """
        profile = await self.profile_repo.get_by_id(profile_id)
        role = (profile.role or "").lower() if profile else ""
        if role not in ORGANIZER_ROLES:
            return False, "Only organizers can view organizer earnings", None

        events = await self.payment_repo.get_organizer_events(profile_id)
        if not events:
            return True, "No events", OrganizerEarnings()

        event_ids = [e.id for e in events]
        payments = await self.payment_repo.get_stream_payments(event_ids)
        payout_requests = await self.payment_repo.get_payout_requests(
            profile_id, ORGANIZER_RECIPIENT_TYPE, event_ids
        )

        breakdown = self.build_breakdown(events, payments)
        total_paid_out, pending = summarize_payouts(payout_requests)
        organizer_share = sum(e.organizer_share for e in breakdown)

        logger.info(
            f"[EARNINGS] Organizer {profile_id}: {len(events)} events, "
            f"{len(payments)} payments, share={organizer_share}"
        )

        return True, "ok", OrganizerEarnings(
            total_revenue=sum(e.total_revenue for e in breakdown),
            total_platform_fees=sum(e.platform_fee for e in breakdown),
            total_fighter_share=sum(e.fighter_share for e in breakdown),
            organizer_share=organizer_share,
            total_paid_out=total_paid_out,
            pending_requests=pending,
            available_balance=organizer_share - total_paid_out - pending,
            earnings_breakdown=breakdown,
            payout_requests=payout_requests,
        )
