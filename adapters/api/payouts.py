"""
Payout endpoints - organizer earnings.
"""

import logging
from aiohttp import web
from postgrest.exceptions import APIError
from adapters.api.auth import current_user_id, not_authenticated
from core.domain.models import OrganizerEarnings
from core.interfaces.repositories import IAuthRepository
from core.services.earnings_service import EarningsService

logger = logging.getLogger(__name__)


def _iso(value):
    return value.isoformat() if value else None


def serialize_organizer_earnings(earnings: OrganizerEarnings) -> dict:
    """camelCase payload the web client reads"""
    return {
        "totalRevenue": earnings.total_revenue,
        "totalPlatformFees": earnings.total_platform_fees,
        "totalFighterShare": earnings.total_fighter_share,
        "organizerShare": earnings.organizer_share,
        "totalPaidOut": earnings.total_paid_out,
        "pendingRequests": earnings.pending_requests,
        "availableBalance": earnings.available_balance,
        "earningsBreakdown": [
            {
                "eventId": e.event_id,
                "eventName": e.event_name,
                "eventDate": e.event_date,
                "totalRevenue": e.total_revenue,
                "platformFee": e.platform_fee,
                "fighterShare": e.fighter_share,
                "organizerShare": e.organizer_share,
            }
            for e in earnings.earnings_breakdown
        ],
        "payoutRequests": [
            {
                "id": pr.id,
                "event_id": pr.event_id,
                "amount_requested": pr.amount_requested,
                "status": pr.status,
                "created_at": _iso(pr.created_at),
                "processed_at": _iso(pr.processed_at),
                "recipient_type": pr.recipient_type,
                "recipient_profile_id": pr.recipient_profile_id,
            }
            for pr in earnings.payout_requests
        ],
    }


def create_payout_routes(
    auth_repo: IAuthRepository,
    earnings_service: EarningsService,
) -> web.RouteTableDef:
    routes = web.RouteTableDef()

    @routes.get("/api/payouts/organizer/earnings")
    async def handle_organizer_earnings(request: web.Request) -> web.Response:
        user_id = await current_user_id(request, auth_repo)
        if not user_id:
            return not_authenticated()

        try:
            ok, message, earnings = await earnings_service.get_organizer_earnings(user_id)
        except (APIError, ValueError) as e:
            # ValueError covers rows the models reject
            logger.error(f"[PAYOUTS] Organizer earnings error: {e}")
            return web.json_response(
                {"error": "Failed to calculate organizer earnings"}, status=500
            )

        if not ok:
            return web.json_response({"error": message}, status=403)
        return web.json_response(serialize_organizer_earnings(earnings))

    return routes
